"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesspad.core.enums import Color, MoveKind, PieceKind
from chesspad.core.types import Coord


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move as classified by the rules oracle.

    Instances are built by an ``IRulesOracle``. The only other way to get
    one is :meth:`reversed` / :meth:`replayed`, which produce *fictional*
    moves used to drive animations; those are never applied to a board.
    """

    src: Coord
    dst: Coord
    kind: MoveKind = MoveKind.NORMAL

    @property
    def promotion(self) -> PieceKind | None:
        return self.kind.promotion_piece

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    def reversed(self) -> Move:
        """Geometric inverse (destination back to source), same kind."""
        return Move(self.dst, self.src, self.kind)

    def replayed(self) -> Move:
        """Fictional copy of this move for forward-navigation animations."""
        return Move(self.src, self.dst, self.kind)

    def __str__(self) -> str:
        base = f"{self.src}{self.dst}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base


@dataclass(frozen=True, slots=True)
class SanMove:
    """Rules-independent description of a move reported to the host."""

    san: str
    piece: PieceKind
    color: Color

    def __str__(self) -> str:
        return f"{self.color} {self.piece} {self.san}"
