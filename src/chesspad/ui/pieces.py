"""PieceItem — a chess piece drawn as a Unicode glyph on the scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QCursor, QFont
from PyQt6.QtWidgets import QGraphicsTextItem

from chesspad.core.enums import Color, PieceKind
from chesspad.core.types import Coord

# Filled glyphs for both sides; the text colour tells them apart.
_GLYPHS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
}

# Outline (white) / filled (black) glyphs for text widgets without colour.
FIGURINES: dict[Color, dict[PieceKind, str]] = {
    Color.WHITE: {
        PieceKind.PAWN: "♙",
        PieceKind.KNIGHT: "♘",
        PieceKind.BISHOP: "♗",
        PieceKind.ROOK: "♖",
        PieceKind.QUEEN: "♕",
        PieceKind.KING: "♔",
    },
    Color.BLACK: dict(_GLYPHS),
}


def glyph(piece: PieceKind) -> str:
    return _GLYPHS[piece]


class PieceItem(QGraphicsTextItem):
    """A single chess piece on the board.

    Stores its logical *square*; being a ``QGraphicsObject`` its ``pos``
    can be driven by ``QPropertyAnimation``.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self,
        piece: PieceKind,
        color: Color,
        square: Coord,
        tile_size: int,
        text_color: QColor,
    ) -> None:
        super().__init__(glyph(piece))
        self.piece = piece
        self.color = color
        self.square = square
        self._tile_size = tile_size

        self.setDefaultTextColor(text_color)
        self.setAcceptHoverEvents(False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_size(tile_size)

    @property
    def margin(self) -> tuple[float, float]:
        """Offset that centres the glyph inside its tile."""
        rect = self.boundingRect()
        return (
            (self._tile_size - rect.width()) / 2.0,
            (self._tile_size - rect.height()) / 2.0,
        )

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(int(size * self._FONT_RATIO), 1))
        self.setFont(font)
