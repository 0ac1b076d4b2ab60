"""Abstract rules oracle.

The board widget never implements chess rules itself: move legality,
FEN parsing and SAN/UCI conversion are delegated to an ``IRulesOracle``.
Board snapshots are opaque to the widget and must be treated as immutable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeAlias

from chesspad.core.enums import Color, PieceKind
from chesspad.core.move import Move
from chesspad.core.types import Coord

BoardSnapshot: TypeAlias = Any


class IRulesOracle(ABC):
    """Interface for the chess rules engine backing a board."""

    @abstractmethod
    def parse_position(self, fen: str) -> BoardSnapshot:
        """Parse *fen*. Raises ``PositionParseError``."""

    @abstractmethod
    def to_fen(self, board: BoardSnapshot) -> str:
        """Serialize *board* back to FEN."""

    @abstractmethod
    def apply_move(self, board: BoardSnapshot, move: Move) -> BoardSnapshot:
        """Return a new snapshot with *move* played. Raises ``MoveApplicationError``.

        The input snapshot must not be modified.
        """

    @abstractmethod
    def validate_coordinate_move(
        self,
        src: Coord,
        dst: Coord,
        promotion: PieceKind | None,
        board: BoardSnapshot,
    ) -> Move:
        """Validate a from/to pair. Raises ``IllegalMoveError``."""

    @abstractmethod
    def validate_uci(self, text: str, board: BoardSnapshot) -> Move:
        """Validate UCI text. Raises ``ActionParseError``."""

    @abstractmethod
    def validate_san(self, text: str, board: BoardSnapshot) -> Move:
        """Validate SAN text. Raises ``ActionParseError``."""

    @abstractmethod
    def render_san(self, move: Move, board: BoardSnapshot) -> str:
        """SAN for a move legal on *board*."""

    @abstractmethod
    def render_uci(self, move: Move, board: BoardSnapshot) -> str:
        """UCI for a move legal on *board*."""

    @abstractmethod
    def cell_at(
        self, board: BoardSnapshot, coord: Coord
    ) -> tuple[PieceKind, Color] | None:
        """Piece kind and color on *coord*, or ``None`` for an empty square."""

    @abstractmethod
    def side_to_move(self, board: BoardSnapshot) -> Color: ...

    @abstractmethod
    def legal_destinations(self, board: BoardSnapshot, src: Coord) -> set[Coord]:
        """Squares the piece on *src* can legally move to."""

    @abstractmethod
    def pretty_print(self, board: BoardSnapshot) -> str:
        """Human-readable board, for diagnostics only."""
