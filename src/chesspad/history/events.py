"""Descriptors the historical board reports to its host."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chesspad.core.move import SanMove


class BoardActionKind(IntEnum):
    """Kind of change a ``BoardAction`` describes."""

    APPLY = auto()
    REVERT = auto()
    STEP_BACK = auto()
    STEP_FORWARD = auto()
    SET_START_POSITION = auto()
    SET_END_POSITION = auto()
    POSITION_RESET = auto()


@dataclass(frozen=True, slots=True)
class BoardAction:
    """One navigation or move event.

    For a history ``Intermediate(b1, m1) -> Intermediate(b2, m2) -> Last(b3)``
    viewed at ``b2``: stepping back reports ``m1`` (the move that led to
    ``b2``), stepping forward reports ``m2`` (the move that leaves ``b2``).
    """

    kind: BoardActionKind
    move: SanMove | None = None
    fen: str | None = None

    @classmethod
    def apply(cls, move: SanMove) -> BoardAction:
        return cls(BoardActionKind.APPLY, move)

    @classmethod
    def revert(cls, move: SanMove) -> BoardAction:
        return cls(BoardActionKind.REVERT, move)

    @classmethod
    def step_back(cls, move: SanMove) -> BoardAction:
        return cls(BoardActionKind.STEP_BACK, move)

    @classmethod
    def step_forward(cls, move: SanMove) -> BoardAction:
        return cls(BoardActionKind.STEP_FORWARD, move)

    @classmethod
    def set_start_position(cls) -> BoardAction:
        return cls(BoardActionKind.SET_START_POSITION)

    @classmethod
    def set_end_position(cls) -> BoardAction:
        return cls(BoardActionKind.SET_END_POSITION)

    @classmethod
    def position_reset(cls, fen: str) -> BoardAction:
        return cls(BoardActionKind.POSITION_RESET, fen=fen)

    def __str__(self) -> str:
        label = self.kind.name.replace("_", " ").capitalize()
        if self.move is not None:
            return f"{label} {self.move}"
        if self.fen is not None:
            return f"{label} {self.fen}"
        return label
