"""Move builder — the move-construction state machine."""

from chesspad.builder.applicable import (
    AnimationPair,
    ApplicableKind,
    ApplicableMove,
    MoveAction,
    MoveActionKind,
    castling_legs,
)
from chesspad.builder.move_builder import MoveBuilder
from chesspad.builder.state import (
    EMPTY,
    BuilderState,
    Empty,
    PromotionPending,
    PromotionReady,
    SourceSelected,
)

__all__ = [
    # States
    "BuilderState",
    "EMPTY",
    "Empty",
    "SourceSelected",
    "PromotionPending",
    "PromotionReady",
    "ApplicableKind",
    "ApplicableMove",
    # Results
    "AnimationPair",
    "MoveAction",
    "MoveActionKind",
    "castling_legs",
    # Machine
    "MoveBuilder",
]
