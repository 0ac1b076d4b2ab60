"""Move builder states.

The builder is always in exactly one of::

    Empty ──select own piece──► SourceSelected ──illegal / same square──► Empty
                                     │
                     ┌───────────────┴──────────────┐
                legal, no promotion          legal, promotion
                     │                              │
                     │                      PromotionPending
                     │                              │ finalize()
                     │                       PromotionReady ──illegal──► Empty
                     │                              │ choose_promotion()
                     └──────────► ApplicableMove ◄──┘
                                     │ finalize()
                                     ▼
                                   Empty
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesspad.builder.applicable import AnimationPair, ApplicableMove
from chesspad.core.types import Coord


@dataclass(frozen=True, slots=True)
class Empty:
    """No square selected."""

    def animations(self) -> list[AnimationPair]:
        return []


@dataclass(frozen=True, slots=True)
class SourceSelected:
    """A piece of the side to move has been picked up."""

    src: Coord

    def animations(self) -> list[AnimationPair]:
        return []


@dataclass(frozen=True, slots=True)
class PromotionPending:
    """Destination known, the pawn is still travelling to it."""

    src: Coord
    dst: Coord

    def animations(self) -> list[AnimationPair]:
        return [(self.src, self.dst)]


@dataclass(frozen=True, slots=True)
class PromotionReady:
    """The pawn has arrived; the promotion picker should be shown."""

    src: Coord
    dst: Coord

    def animations(self) -> list[AnimationPair]:
        return []


BuilderState: TypeAlias = (
    Empty | SourceSelected | PromotionPending | PromotionReady | ApplicableMove
)

EMPTY = Empty()
