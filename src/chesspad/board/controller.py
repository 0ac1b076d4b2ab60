"""ChessboardController — the state a presentation layer reads and feeds.

Owns one ``MoveBuilder`` and one ``HistoricalBoard``. A view reads the
board, selection, animations and promotion request from here, forwards
clicks and animation ends, and re-renders whenever ``events.on_changed``
fires.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesspad.board.action import (
    Action,
    ActionSequencer,
    apply_if_unprocessed,
    default_sequencer,
)
from chesspad.board.client import ChessboardClient
from chesspad.board.config import ChessboardConfig
from chesspad.builder.applicable import AnimationPair, MoveActionKind
from chesspad.builder.move_builder import MoveBuilder
from chesspad.builder.state import BuilderState
from chesspad.core.channels import IChannel
from chesspad.core.enums import Color, PieceKind
from chesspad.core.errors import MoveApplicationError
from chesspad.core.move import Move
from chesspad.core.types import Coord
from chesspad.history.board import HistoricalBoard
from chesspad.history.events import BoardAction
from chesspad.rules.interfaces import BoardSnapshot, IRulesOracle
from chesspad.rules.python_chess import PythonChessOracle

_LOGGER = logging.getLogger(__name__)

_PROMOTION_PIECES = (PieceKind.QUEEN, PieceKind.KNIGHT, PieceKind.ROOK, PieceKind.BISHOP)

ChangeCallback = Callable[[], None]


@dataclass
class ChessboardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_changed: list[ChangeCallback] = field(default_factory=list)


class ChessboardController:
    """Glue between the presentation layer and the board core.

    Thread-safety: every method must be called from the thread owning the
    view. Hosts on other threads talk to the board through a
    ``ChessboardClient`` drained by :meth:`poll_actions`.

    Raises ``PositionParseError`` when the configured starting position
    is not valid FEN.
    """

    __slots__ = (
        "_config",
        "_oracle",
        "_builder",
        "_history",
        "_sequencer",
        "_client",
        "_orientation",
        "events",
    )

    def __init__(
        self,
        config: ChessboardConfig | None = None,
        *,
        oracle: IRulesOracle | None = None,
        report: IChannel[BoardAction] | None = None,
        client: ChessboardClient | None = None,
        sequencer: ActionSequencer | None = None,
    ) -> None:
        self._config = config or ChessboardConfig()
        self._oracle = oracle or PythonChessOracle()
        self._history = HistoricalBoard.initialize(
            self._config.starting_position, self._oracle, report
        )
        self._builder = MoveBuilder(self._oracle)
        self._client = client
        if sequencer is None:
            sequencer = client.sequencer if client is not None else default_sequencer()
        self._sequencer = sequencer
        self._orientation = self._config.player_color
        self.events = ChessboardEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> ChessboardConfig:
        return self._config

    @property
    def oracle(self) -> IRulesOracle:
        return self._oracle

    @property
    def builder(self) -> MoveBuilder:
        return self._builder

    @property
    def history(self) -> HistoricalBoard:
        return self._history

    @property
    def board(self) -> BoardSnapshot:
        """The position currently on display."""
        return self._history.viewed_board()

    @property
    def builder_state(self) -> BuilderState:
        return self._builder.state

    @property
    def orientation(self) -> Color:
        """Side shown at the bottom of the board."""
        return self._orientation

    @property
    def is_interactive(self) -> bool:
        """May the user move pieces right now?

        Requires the board to be interactive and, in single-player mode,
        the configured player to be on move. Past positions are read-only.
        """
        cfg = self._config
        if not cfg.is_interactive or not self._history.is_viewing_latest:
            return False
        if not cfg.single_player_mode:
            return True
        return self._history.side_to_move() == cfg.player_color

    @property
    def selected_square(self) -> Coord | None:
        """Source square to highlight, unless a piece is in flight."""
        src = self._builder.current_source()
        if src is None or self._builder.pending_animation_target(src) is not None:
            return None
        return src

    @property
    def animations(self) -> list[AnimationPair]:
        return self._builder.animations()

    @property
    def promotion_request(self) -> tuple[Coord, Coord] | None:
        return self._builder.promotion_request()

    @property
    def last_move(self) -> Move | None:
        """Move leading into the displayed position, for highlighting."""
        return self._history.previous_move()

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, coord: Coord) -> tuple[PieceKind, Color] | None:
        return self._oracle.cell_at(self.board, coord)

    def legal_destinations(self) -> set[Coord]:
        """Targets of the selected piece (empty when nothing is selected)."""
        src = self.selected_square
        if src is None:
            return set()
        return self._oracle.legal_destinations(self.board, src)

    def promotion_pieces(self) -> list[PieceKind]:
        """Picker pieces, ordered outward from the promotion square.

        Queen first when the promoting side moves up the screen, bishop
        first when it moves down.
        """
        request = self.promotion_request
        if request is None:
            return []
        _, dst = request
        pieces = list(_PROMOTION_PIECES)
        if dst.rank != self._orientation.last_rank:
            pieces.reverse()
        return pieces

    def promoting_color(self) -> Color | None:
        request = self.promotion_request
        if request is None:
            return None
        cell = self.piece_at(request[0])
        return cell[1] if cell is not None else None

    # ── Configuration ────────────────────────────────────────────────────

    def attach_report(self, report: IChannel[BoardAction] | None) -> None:
        """Route move/navigation reports to *report*."""
        self._history.report = report

    def set_interactive(self, interactive: bool) -> None:
        self._config.is_interactive = interactive
        if not interactive:
            self._builder.cancel()
        self._notify()

    def flip(self) -> None:
        """Swap the side shown at the bottom."""
        self._orientation = self._orientation.opposite
        self._notify()

    # ── Event intake ─────────────────────────────────────────────────────

    def on_square_clicked(self, coord: Coord) -> None:
        if not self.is_interactive:
            _LOGGER.debug("Ignoring click on %s: board is not interactive", coord)
            return
        self._builder.select_square(coord, self.board)
        self._settle()
        self._notify()

    def on_promotion_piece_clicked(self, piece: PieceKind) -> None:
        self._builder.choose_promotion(piece, self.board)
        self._settle()
        self._notify()

    def on_promotion_cancelled(self) -> None:
        self._builder.cancel()
        self._notify()

    def on_animation_finished(self) -> None:
        """Commit whatever the builder was animating."""
        self._finish()
        self._notify()

    def dispatch(self, action: Action) -> bool:
        """Apply an injected action at most once. See ``apply_if_unprocessed``."""
        processed = apply_if_unprocessed(
            action,
            self._builder,
            self._history,
            sequencer=self._sequencer,
            is_interactive=self._config.is_interactive,
        )
        if processed:
            self._settle()
            self._notify()
        return processed

    def poll_actions(self) -> int:
        """Dispatch every action waiting in the client queue."""
        if self._client is None:
            return 0
        actions = self._client.take_pending()
        for action in actions:
            self.dispatch(action)
        return len(actions)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self) -> None:
        action = self._builder.finalize()
        if action is None:
            return

        kind = action.kind
        if kind == MoveActionKind.APPLY:
            try:
                self._history.apply_move(action.move)
            except MoveApplicationError as exc:
                _LOGGER.error("Move %s was not applied: %s", action.move, exc)
                return
            _LOGGER.debug("New board\n%s", self._history)
        elif kind == MoveActionKind.REVERT:
            self._history.revert_last_applied_move()
        elif kind == MoveActionKind.STEP_BACK:
            self._history.step_back()
        elif kind == MoveActionKind.STEP_FORWARD:
            self._history.step_forward()

    def _settle(self) -> None:
        """Without animations, run the builder forward immediately."""
        if self._config.animate_moves:
            return
        while self._builder.animations():
            self._finish()

    def _notify(self) -> None:
        for cb in self.events.on_changed:
            cb()
