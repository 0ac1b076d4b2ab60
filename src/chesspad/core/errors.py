"""Exception hierarchy shared by the chessboard layers."""

from __future__ import annotations


class ChessboardError(Exception):
    """Base class for every error raised by chesspad."""


class PositionParseError(ChessboardError, ValueError):
    """A FEN string could not be parsed into a position."""

    def __init__(self, fen: str, reason: str = "") -> None:
        self.fen = fen
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid FEN {fen!r}{detail}")


class IllegalMoveError(ChessboardError, ValueError):
    """A candidate move failed rules validation."""

    def __init__(self, notation: str, reason: str = "") -> None:
        self.notation = notation
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Illegal move {notation!r}{detail}")


class ActionParseError(IllegalMoveError):
    """Injected SAN/UCI text is malformed or illegal in the position."""


class MoveApplicationError(ChessboardError):
    """The rules oracle refused to apply an already validated move."""
