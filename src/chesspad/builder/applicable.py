"""Fully resolved builder moves and the actions they finalize into."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chesspad.core.enums import MoveKind
from chesspad.core.move import Move
from chesspad.core.types import Coord

AnimationPair = tuple[Coord, Coord]

# King and rook files for each castling side: (king_from, king_to, rook_from, rook_to)
_CASTLING_FILES: dict[MoveKind, tuple[int, int, int, int]] = {
    MoveKind.CASTLE_KINGSIDE: (4, 6, 7, 5),  # E→G, H→F
    MoveKind.CASTLE_QUEENSIDE: (4, 2, 0, 3),  # E→C, A→D
}


class ApplicableKind(IntEnum):
    """How an applicable move came to be."""

    MANUAL = auto()  # built square by square
    AUTOMATIC = auto()  # injected as SAN / UCI text
    REVERT = auto()  # fictional, animates an undo
    STEP_BACK = auto()  # fictional, animates history navigation
    STEP_FORWARD = auto()  # fictional, animates history navigation


class MoveActionKind(IntEnum):
    """What the owner of the builder must do after ``finalize()``."""

    APPLY = auto()
    REVERT = auto()
    STEP_BACK = auto()
    STEP_FORWARD = auto()


@dataclass(frozen=True, slots=True)
class MoveAction:
    """Result of finalizing an applicable move.

    Only ``APPLY`` carries a move that may be played on a board; the move
    of every other kind is the fictional animation move.
    """

    kind: MoveActionKind
    move: Move


_ACTION_FOR: dict[ApplicableKind, MoveActionKind] = {
    ApplicableKind.MANUAL: MoveActionKind.APPLY,
    ApplicableKind.AUTOMATIC: MoveActionKind.APPLY,
    ApplicableKind.REVERT: MoveActionKind.REVERT,
    ApplicableKind.STEP_BACK: MoveActionKind.STEP_BACK,
    ApplicableKind.STEP_FORWARD: MoveActionKind.STEP_FORWARD,
}


def castling_legs(kind: MoveKind, rank: int, *, backwards: bool = False) -> list[AnimationPair]:
    """King and rook legs of a castling move on *rank*.

    With *backwards* the legs are reversed, which is how an undone castle
    is animated.
    """
    king_from, king_to, rook_from, rook_to = _CASTLING_FILES[kind]
    legs = [
        (Coord(king_from, rank), Coord(king_to, rank)),
        (Coord(rook_from, rank), Coord(rook_to, rank)),
    ]
    if backwards:
        return [(dst, src) for src, dst in legs]
    return legs


@dataclass(frozen=True, slots=True)
class ApplicableMove:
    """Builder state holding a move that is ready to be finalized."""

    kind: ApplicableKind
    move: Move

    @property
    def is_fictional(self) -> bool:
        """True when the move only exists to drive an animation."""
        return _ACTION_FOR[self.kind] != MoveActionKind.APPLY

    def animations(self) -> list[AnimationPair]:
        """Square pairs to animate, including the rook leg of a castle."""
        m = self.move
        if not m.kind.is_castling:
            return [(m.src, m.dst)]
        backwards = self.kind in (ApplicableKind.REVERT, ApplicableKind.STEP_BACK)
        return castling_legs(m.kind, m.src.rank, backwards=backwards)

    def to_action(self) -> MoveAction:
        return MoveAction(_ACTION_FOR[self.kind], self.move)
