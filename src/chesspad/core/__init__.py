"""Core domain layer — value types with zero external dependencies.

Quick start::

    from chesspad.core import Coord, Move, MoveKind

    e2 = Coord.parse("e2")
    print(e2.file, e2.rank)  # 4 1
"""

from chesspad.core.enums import Color, MoveKind, PieceKind
from chesspad.core.errors import (
    ActionParseError,
    ChessboardError,
    IllegalMoveError,
    MoveApplicationError,
    PositionParseError,
)
from chesspad.core.move import Move, SanMove
from chesspad.core.types import Coord, all_coords

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

__all__ = [
    # Enums
    "Color",
    "MoveKind",
    "PieceKind",
    # Types
    "Coord",
    "Move",
    "SanMove",
    "all_coords",
    "STARTING_FEN",
    # Errors
    "ActionParseError",
    "ChessboardError",
    "IllegalMoveError",
    "MoveApplicationError",
    "PositionParseError",
]
