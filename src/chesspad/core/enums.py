"""Core enumerations for the chessboard domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def last_rank(self) -> int:
        """Rank index a pawn of this color promotes on."""
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lower-case letter used by UCI / FEN (``p``, ``n``, ...)."""
        return _PIECE_LETTERS[self]

    def __str__(self) -> str:
        return self.name.lower()


_PIECE_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}


class MoveKind(IntEnum):
    """Move classification reported by the rules oracle."""

    NORMAL = 0
    PAWN_DOUBLE = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTE_KNIGHT = 5
    PROMOTE_BISHOP = 6
    PROMOTE_ROOK = 7
    PROMOTE_QUEEN = 8

    @property
    def is_castling(self) -> bool:
        return self in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)

    @property
    def is_promotion(self) -> bool:
        return self.promotion_piece is not None

    @property
    def promotion_piece(self) -> PieceKind | None:
        return _PROMOTION_PIECES.get(self)

    @classmethod
    def promotion_to(cls, piece: PieceKind) -> MoveKind:
        """Return the promotion kind for *piece*."""
        for kind, promoted in _PROMOTION_PIECES.items():
            if promoted == piece:
                return kind
        raise ValueError(f"Pawns cannot promote to {piece.name.lower()}")


_PROMOTION_PIECES: dict[MoveKind, PieceKind] = {
    MoveKind.PROMOTE_KNIGHT: PieceKind.KNIGHT,
    MoveKind.PROMOTE_BISHOP: PieceKind.BISHOP,
    MoveKind.PROMOTE_ROOK: PieceKind.ROOK,
    MoveKind.PROMOTE_QUEEN: PieceKind.QUEEN,
}
