"""Actions a host injects into a board, applied at most once each.

A host may hand the same ``Action`` to the board on every re-render;
the discriminator makes repeated deliveries no-ops::

    action = Action.step_back()
    apply_if_unprocessed(action, builder, history)  # steps back
    apply_if_unprocessed(action, builder, history)  # ignored
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import IntEnum, auto

from chesspad.builder.move_builder import MoveBuilder
from chesspad.core.errors import ActionParseError, PositionParseError
from chesspad.history.board import HistoricalBoard

_LOGGER = logging.getLogger(__name__)


class ActionSequencer:
    """Issues discriminators and remembers the last processed one.

    One sequencer is normally shared by a host and every board it feeds.
    All methods are thread-safe.
    """

    __slots__ = ("_lock", "_next", "_processed")

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._next = start
        # Never issued, so the first delivered action always counts as new.
        self._processed = start - 1

    def next_discriminator(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    @property
    def last_processed(self) -> int:
        return self._processed

    def is_processed(self, action: Action) -> bool:
        return self._processed == action.discriminator

    def claim(self, action: Action) -> bool:
        """Mark *action* processed; ``False`` if it already was."""
        with self._lock:
            if self._processed == action.discriminator:
                return False
            self._processed = action.discriminator
            return True


_DEFAULT_SEQUENCER = ActionSequencer()


def default_sequencer() -> ActionSequencer:
    """Process-wide sequencer used when none is passed explicitly."""
    return _DEFAULT_SEQUENCER


class ActionKind(IntEnum):
    """Commands a host can send to a board."""

    MAKE_MOVE = auto()
    REVERT_MOVE = auto()
    SET_POSITION = auto()
    STEP_BACK = auto()
    STEP_FORWARD = auto()
    SET_START = auto()
    SET_END = auto()


@dataclass(frozen=True, slots=True)
class Action:
    """An injected command with a unique discriminator.

    Build instances through the factory class methods so each one gets a
    fresh discriminator from the sequencer.
    """

    discriminator: int
    kind: ActionKind
    text: str | None = None  # move text or FEN

    @classmethod
    def _issue(
        cls,
        kind: ActionKind,
        text: str | None = None,
        sequencer: ActionSequencer | None = None,
    ) -> Action:
        seq = sequencer or _DEFAULT_SEQUENCER
        return cls(seq.next_discriminator(), kind, text)

    @classmethod
    def make_move(cls, move: str, *, sequencer: ActionSequencer | None = None) -> Action:
        """Play a move written in SAN (``"Nf3"``) or UCI (``"g1f3"``)."""
        return cls._issue(ActionKind.MAKE_MOVE, move, sequencer)

    @classmethod
    def revert_move(cls, *, sequencer: ActionSequencer | None = None) -> Action:
        return cls._issue(ActionKind.REVERT_MOVE, sequencer=sequencer)

    @classmethod
    def set_position(cls, fen: str, *, sequencer: ActionSequencer | None = None) -> Action:
        return cls._issue(ActionKind.SET_POSITION, fen, sequencer)

    @classmethod
    def step_back(cls, *, sequencer: ActionSequencer | None = None) -> Action:
        return cls._issue(ActionKind.STEP_BACK, sequencer=sequencer)

    @classmethod
    def step_forward(cls, *, sequencer: ActionSequencer | None = None) -> Action:
        return cls._issue(ActionKind.STEP_FORWARD, sequencer=sequencer)

    @classmethod
    def set_start(cls, *, sequencer: ActionSequencer | None = None) -> Action:
        return cls._issue(ActionKind.SET_START, sequencer=sequencer)

    @classmethod
    def set_end(cls, *, sequencer: ActionSequencer | None = None) -> Action:
        return cls._issue(ActionKind.SET_END, sequencer=sequencer)


def apply_if_unprocessed(
    action: Action,
    move_builder: MoveBuilder,
    historical_board: HistoricalBoard,
    *,
    sequencer: ActionSequencer | None = None,
    is_interactive: bool = True,
) -> bool:
    """Apply *action* unless it has already been processed.

    Moves and navigation only prime the builder with the (possibly
    fictional) move to animate; the history changes once the builder is
    finalized. Returns ``True`` when the action was processed now.

    Each action is applied at most once, not exactly once: a second move
    or navigation action that arrives before the builder is finalized
    replaces the pending one, so only the later one reaches the history.
    """
    seq = sequencer or _DEFAULT_SEQUENCER
    if not seq.claim(action):
        _LOGGER.debug("Action %s has already been processed", action)
        return False

    _LOGGER.debug("Received action: %s", action)
    kind = action.kind

    if kind == ActionKind.SET_POSITION:
        fen = action.text or ""
        try:
            historical_board.replace_position(fen)
        except PositionParseError as exc:
            _LOGGER.warning("Injected position rejected: %s", exc)
            return True
        move_builder.cancel()
    elif kind == ActionKind.SET_START:
        historical_board.jump_to_start()
    elif kind == ActionKind.SET_END:
        historical_board.jump_to_end()
    elif kind == ActionKind.STEP_BACK:
        m = historical_board.previous_move()
        if m is not None:
            move_builder.step_back(m)
    elif kind == ActionKind.STEP_FORWARD:
        m = historical_board.next_move()
        if m is not None:
            move_builder.step_forward(m)
    elif not is_interactive:
        _LOGGER.info("Ignoring %s: board is not interactive", action)
    elif kind == ActionKind.MAKE_MOVE:
        _make_move(action.text or "", move_builder, historical_board)
    elif kind == ActionKind.REVERT_MOVE:
        m = historical_board.last_applied_move()
        if m is not None:
            move_builder.revert(m)
    return True


def _make_move(
    text: str, move_builder: MoveBuilder, historical_board: HistoricalBoard
) -> None:
    try:
        move_builder.submit_move(text, historical_board.viewed_board())
    except ActionParseError:
        _LOGGER.warning(
            "Injected move %s is not legal in the current position\n%s",
            text,
            historical_board,
        )
        return
    _LOGGER.info("Injected move: %s", text)
