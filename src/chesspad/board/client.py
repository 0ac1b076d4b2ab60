"""Host-side handle for sending actions into a board."""

from __future__ import annotations

from chesspad.board.action import Action, ActionSequencer, default_sequencer
from chesspad.core.channels import QueueChannel


class ChessboardClient:
    """Inbound action queue shared between a host and one board.

    The host calls :meth:`send` (from any thread); the board drains the
    queue with ``ChessboardController.poll_actions``. Actions created via
    :meth:`make_move` and friends use the client's sequencer.
    """

    __slots__ = ("_channel", "sequencer")

    def __init__(
        self, sequencer: ActionSequencer | None = None, maxsize: int = 0
    ) -> None:
        self._channel: QueueChannel[Action] = QueueChannel(maxsize)
        self.sequencer = sequencer or default_sequencer()

    def send(self, action: Action) -> bool:
        """Queue *action*; ``False`` if the queue is full or closed."""
        return self._channel.send(action)

    def make_move(self, move: str) -> bool:
        return self.send(Action.make_move(move, sequencer=self.sequencer))

    def revert_move(self) -> bool:
        return self.send(Action.revert_move(sequencer=self.sequencer))

    def set_position(self, fen: str) -> bool:
        return self.send(Action.set_position(fen, sequencer=self.sequencer))

    def step_back(self) -> bool:
        return self.send(Action.step_back(sequencer=self.sequencer))

    def step_forward(self) -> bool:
        return self.send(Action.step_forward(sequencer=self.sequencer))

    def set_start(self) -> bool:
        return self.send(Action.set_start(sequencer=self.sequencer))

    def set_end(self) -> bool:
        return self.send(Action.set_end(sequencer=self.sequencer))

    def take_pending(self) -> list[Action]:
        """Remove and return every queued action, oldest first."""
        return self._channel.drain()

    def close(self) -> None:
        self._channel.close()

    def __len__(self) -> int:
        return len(self._channel)
