"""HistoricalBoard — board snapshots plus a navigable step pointer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from chesspad.core.channels import IChannel
from chesspad.core.enums import Color
from chesspad.core.errors import MoveApplicationError
from chesspad.core.move import Move, SanMove
from chesspad.history.events import BoardAction
from chesspad.rules.interfaces import BoardSnapshot, IRulesOracle

_LOGGER = logging.getLogger(__name__)

_AT_LEAST_ONE_STEP = "[BUG] History must contain at least 1 step"
_LAST_BUT_ONE_IS_INTERMEDIATE = "[BUG] Last but one step must be an intermediate step"


@dataclass(frozen=True, slots=True)
class LastStep:
    """Final snapshot of the line; no move leaves it yet."""

    board: BoardSnapshot


@dataclass(frozen=True, slots=True)
class IntermediateStep:
    """Snapshot plus the move that was played from it."""

    board: BoardSnapshot
    move: Move


Step: TypeAlias = LastStep | IntermediateStep


class HistoricalBoard:
    """Sequence of board snapshots with undo and navigation.

    History always has the shape ``Intermediate*, Last``. The step
    pointer selects the snapshot being *viewed*; stepping does not touch
    the history, while playing a move from a past snapshot discards the
    steps after it (no branches are kept).

    Every change is reported as a ``BoardAction`` on the optional
    *report* channel.
    """

    __slots__ = ("_oracle", "_history", "_step_pointer", "report")

    def __init__(
        self,
        oracle: IRulesOracle,
        board: BoardSnapshot,
        report: IChannel[BoardAction] | None = None,
    ) -> None:
        self._oracle = oracle
        self._history: list[Step] = [LastStep(board)]
        self._step_pointer = 0
        self.report = report

    @classmethod
    def initialize(
        cls,
        fen: str,
        oracle: IRulesOracle,
        report: IChannel[BoardAction] | None = None,
    ) -> HistoricalBoard:
        """Board from FEN. Raises ``PositionParseError``."""
        return cls(oracle, oracle.parse_position(fen), report)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def step_pointer(self) -> int:
        return self._step_pointer

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._history)

    @property
    def is_viewing_latest(self) -> bool:
        return self._step_pointer == len(self._history) - 1

    def current_board(self) -> BoardSnapshot:
        """The latest position, regardless of the step pointer."""
        last = self._history[-1]
        if not isinstance(last, LastStep):
            raise RuntimeError("[BUG] History must end with the last step")
        return last.board

    def viewed_board(self) -> BoardSnapshot:
        """The position under the step pointer."""
        return self._history[self._step_pointer].board

    def side_to_move(self) -> Color:
        """Side to move in the latest position, even while viewing history."""
        return self._oracle.side_to_move(self.current_board())

    def fen(self) -> str:
        return self._oracle.to_fen(self.viewed_board())

    # ── Moves ────────────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> None:
        """Play *move* on the viewed board.

        Steps after the pointer are discarded and the new position becomes
        the last step. Raises ``MoveApplicationError`` without touching the
        history when the oracle refuses the move.
        """
        _LOGGER.debug("Making a move %s", move)
        board = self.viewed_board()
        try:
            new_board = self._oracle.apply_move(board, move)
        except MoveApplicationError:
            _LOGGER.error("Refusing to apply %s\n%s", move, self)
            raise

        del self._history[self._step_pointer + 1 :]
        self._history.pop()
        self._history.append(IntermediateStep(board, move))
        self._history.append(LastStep(new_board))
        self._step_pointer = len(self._history) - 1

        self._report(BoardAction.apply(self._describe(board, move)))

    def last_applied_move(self) -> Move | None:
        """Move that produced the last step, if any."""
        if len(self._history) < 2:
            return None
        step = self._history[-2]
        if not isinstance(step, IntermediateStep):
            raise RuntimeError(_LAST_BUT_ONE_IS_INTERMEDIATE)
        return step.move

    def revert_last_applied_move(self) -> Move | None:
        """Drop the last step and return the move that led to it."""
        _LOGGER.debug("Reverting the last move")
        if not self._history:
            raise RuntimeError(_AT_LEAST_ONE_STEP)

        last = self._history.pop()
        if not self._history:
            self._history.append(LastStep(last.board))
            self._step_pointer = 0
            return None

        step = self._history.pop()
        if not isinstance(step, IntermediateStep):
            raise RuntimeError(_LAST_BUT_ONE_IS_INTERMEDIATE)
        self._history.append(LastStep(step.board))
        self._step_pointer = len(self._history) - 1

        self._report(BoardAction.revert(self._describe(step.board, step.move)))
        return step.move

    # ── Navigation ───────────────────────────────────────────────────────

    def previous_move(self) -> Move | None:
        """Move that led to the viewed step."""
        if self._step_pointer == 0:
            return None
        step = self._history[self._step_pointer - 1]
        return step.move if isinstance(step, IntermediateStep) else None

    def next_move(self) -> Move | None:
        """Move that leaves the viewed step."""
        step = self._history[self._step_pointer]
        return step.move if isinstance(step, IntermediateStep) else None

    def step_back(self) -> None:
        if self._step_pointer == 0:
            _LOGGER.debug("Stepping back is impossible: viewing the first step")
            return

        self._step_pointer -= 1
        step = self._history[self._step_pointer]
        if not isinstance(step, IntermediateStep):
            raise RuntimeError("[BUG] Stepping back must land on an intermediate step")

        _LOGGER.debug(
            "Stepping back: pointer = %d/%d",
            self._step_pointer,
            len(self._history) - 1,
        )
        self._report(BoardAction.step_back(self._describe(step.board, step.move)))

    def step_forward(self) -> None:
        step = self._history[self._step_pointer]
        if not isinstance(step, IntermediateStep):
            _LOGGER.debug("Stepping forward is impossible: viewing the last step")
            return

        self._step_pointer += 1
        _LOGGER.debug(
            "Stepping forward: pointer = %d/%d",
            self._step_pointer,
            len(self._history) - 1,
        )
        self._report(BoardAction.step_forward(self._describe(step.board, step.move)))

    def jump_to_start(self) -> None:
        self._step_pointer = 0
        self._report(BoardAction.set_start_position())

    def jump_to_end(self) -> None:
        self._step_pointer = len(self._history) - 1
        self._report(BoardAction.set_end_position())

    def replace_position(self, fen: str) -> None:
        """Start over from *fen*, keeping the report channel.

        Raises ``PositionParseError`` and leaves the history untouched when
        *fen* is invalid.
        """
        board = self._oracle.parse_position(fen)
        self._history = [LastStep(board)]
        self._step_pointer = 0
        _LOGGER.debug("Position replaced with %s", fen)
        self._report(BoardAction.position_reset(fen))

    # ── Insights ─────────────────────────────────────────────────────────

    def moves_san(self) -> list[str]:
        """SAN of every recorded move, first to last."""
        return [
            self._oracle.render_san(step.move, step.board)
            for step in self._history
            if isinstance(step, IntermediateStep)
        ]

    def _describe(self, board: BoardSnapshot, move: Move) -> SanMove:
        cell = self._oracle.cell_at(board, move.src)
        if cell is None:
            raise RuntimeError(f"[BUG] Recorded move {move} has no piece on its source")
        piece, color = cell
        return SanMove(self._oracle.render_san(move, board), piece, color)

    def _report(self, action: BoardAction) -> None:
        if self.report is None:
            return
        if not self.report.send(action):
            _LOGGER.debug("Report dropped: %s", action)

    def __str__(self) -> str:
        board = self.viewed_board()
        return (
            f"Board:\n{self._oracle.pretty_print(board)}\n"
            f"Move by: {self._oracle.side_to_move(board)}"
        )
