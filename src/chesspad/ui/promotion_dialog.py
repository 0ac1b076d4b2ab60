"""Promotion dialog — lets the user pick the promotion piece."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesspad.core.enums import Color, PieceKind
from chesspad.ui.pieces import FIGURINES


class PromotionDialog(QDialog):
    """Modal dialog to select the promotion piece.

    Buttons appear in the order given by *pieces*; closing the dialog
    without a choice cancels the promotion.
    """

    def __init__(
        self,
        color: Color,
        pieces: Sequence[PieceKind],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Promotion")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._selected: PieceKind | None = None
        self._buttons: dict[PieceKind, QPushButton] = {}

        layout = QVBoxLayout(self)
        label = QLabel("Promote pawn to:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label)

        font = QFont()
        font.setPixelSize(40)
        btn_row = QHBoxLayout()
        for piece in pieces:
            btn = QPushButton(FIGURINES[color][piece])
            btn.setFont(font)
            btn.setFixedSize(68, 68)
            btn.setToolTip(piece.name.capitalize())
            btn.clicked.connect(lambda checked, p=piece: self._choose(p))
            btn_row.addWidget(btn)
            self._buttons[piece] = btn

        layout.addLayout(btn_row)

    def _choose(self, piece: PieceKind) -> None:
        self._selected = piece
        self.accept()

    @property
    def selected(self) -> PieceKind | None:
        return self._selected

    @property
    def buttons(self) -> dict[PieceKind, QPushButton]:
        return self._buttons

    @staticmethod
    def ask(
        color: Color,
        pieces: Sequence[PieceKind],
        parent: QWidget | None = None,
    ) -> PieceKind | None:
        """Show the dialog and return the chosen piece, or ``None`` on cancel."""
        dlg = PromotionDialog(color, pieces, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
