"""MoveBuilder — turns square clicks and injected text into applicable moves."""

from __future__ import annotations

import logging

from chesspad.builder.applicable import (
    AnimationPair,
    ApplicableKind,
    ApplicableMove,
    MoveAction,
)
from chesspad.builder.state import (
    EMPTY,
    BuilderState,
    Empty,
    PromotionPending,
    PromotionReady,
    SourceSelected,
)
from chesspad.core.enums import Color, PieceKind
from chesspad.core.errors import ActionParseError, IllegalMoveError
from chesspad.core.move import Move
from chesspad.core.types import Coord
from chesspad.rules.interfaces import BoardSnapshot, IRulesOracle

_LOGGER = logging.getLogger(__name__)

# Stand-in piece used to ask the oracle whether a pawn move is legal at all
# before the player has picked the real promotion piece.
_PLACEHOLDER_PROMOTION = PieceKind.QUEEN


class MoveBuilder:
    """Finite-state machine accumulating partial move input.

    Legality is never decided here: every candidate is handed to the
    rules oracle. The builder also owns the animation hints of the move
    being built, so reverts and history navigation go through it too.
    """

    __slots__ = ("_oracle", "_state")

    def __init__(self, oracle: IRulesOracle) -> None:
        self._oracle = oracle
        self._state: BuilderState = EMPTY

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> BuilderState:
        return self._state

    def current_source(self) -> Coord | None:
        state = self._state
        if isinstance(state, SourceSelected):
            return state.src
        if isinstance(state, (PromotionPending, PromotionReady)):
            return state.src
        if isinstance(state, ApplicableMove):
            return state.move.src
        return None

    def current_destination(self) -> Coord | None:
        state = self._state
        if isinstance(state, (PromotionPending, PromotionReady)):
            return state.dst
        if isinstance(state, ApplicableMove):
            return state.move.dst
        return None

    # ── Square input ─────────────────────────────────────────────────────

    def select_square(self, coord: Coord, board: BoardSnapshot) -> None:
        """Feed one clicked square into the machine."""
        state = self._state

        if isinstance(state, Empty):
            cell = self._oracle.cell_at(board, coord)
            if cell is not None and cell[1] == self._oracle.side_to_move(board):
                _LOGGER.debug("Selected source square %s", coord)
                self._state = SourceSelected(coord)
            else:
                _LOGGER.debug("Ignoring %s: no piece of the side to move", coord)
            return

        if isinstance(state, SourceSelected):
            if state.src == coord:
                _LOGGER.debug("Deselected %s", coord)
                self._state = EMPTY
                return
            self._state = self._try_destination(state.src, coord, board)
            return

        _LOGGER.debug("Square %s clicked while %r; resetting", coord, state)
        self._state = EMPTY

    def _try_destination(
        self, src: Coord, dst: Coord, board: BoardSnapshot
    ) -> BuilderState:
        needs_promotion = self._is_promotion_required(src, dst, board)
        placeholder = _PLACEHOLDER_PROMOTION if needs_promotion else None
        _LOGGER.debug(
            "Testing hypothetical move %s%s%s\n%s",
            src,
            dst,
            placeholder.letter if placeholder else "",
            self._oracle.pretty_print(board),
        )
        try:
            move = self._oracle.validate_coordinate_move(src, dst, placeholder, board)
        except IllegalMoveError as exc:
            _LOGGER.warning("%s. Cancelling the move", exc)
            return EMPTY

        if needs_promotion:
            return PromotionPending(src, dst)
        return ApplicableMove(ApplicableKind.MANUAL, move)

    def _is_promotion_required(
        self, src: Coord, dst: Coord, board: BoardSnapshot
    ) -> bool:
        """A pawn reaching the last rank for its color needs a promotion piece."""
        cell = self._oracle.cell_at(board, src)
        if cell is None:
            return False
        piece, color = cell
        return piece == PieceKind.PAWN and dst.rank == color.last_rank

    # ── Injected moves ───────────────────────────────────────────────────

    def submit_san(self, san: str, board: BoardSnapshot) -> None:
        """Inject a SAN move. Raises ``ActionParseError``; state is kept on error."""
        move = self._oracle.validate_san(san, board)
        self._state = ApplicableMove(ApplicableKind.AUTOMATIC, move)

    def submit_uci(self, text: str, board: BoardSnapshot) -> None:
        """Inject a UCI move. Raises ``ActionParseError``; state is kept on error."""
        move = self._oracle.validate_uci(text, board)
        self._state = ApplicableMove(ApplicableKind.AUTOMATIC, move)

    def submit_move(self, text: str, board: BoardSnapshot) -> None:
        """Inject a move written either in SAN or in UCI."""
        try:
            self.submit_san(text, board)
        except ActionParseError as san_error:
            try:
                self.submit_uci(text, board)
            except ActionParseError:
                raise san_error from None

    # ── Fictional moves ──────────────────────────────────────────────────

    def revert(self, move: Move) -> None:
        """Animate *move* being taken back. Finalizes into a revert action."""
        self._state = ApplicableMove(ApplicableKind.REVERT, move.reversed())

    def step_back(self, move: Move) -> None:
        self._state = ApplicableMove(ApplicableKind.STEP_BACK, move.reversed())

    def step_forward(self, move: Move) -> None:
        self._state = ApplicableMove(ApplicableKind.STEP_FORWARD, move.replayed())

    # ── Promotion ────────────────────────────────────────────────────────

    def promotion_request(self) -> tuple[Coord, Coord] | None:
        """Squares of the promotion awaiting a piece choice.

        Only answers once the pawn has arrived (``PromotionReady``), so the
        picker appears after the move animation.
        """
        state = self._state
        if isinstance(state, PromotionReady):
            return state.src, state.dst
        return None

    mark_promotion_required = promotion_request

    def choose_promotion(self, piece: PieceKind, board: BoardSnapshot) -> None:
        state = self._state
        if not isinstance(state, PromotionReady):
            _LOGGER.warning("Unexpected promotion while %r. Cancelling the move", state)
            self._state = EMPTY
            return

        _LOGGER.debug(
            "Testing promotion move %s%s%s\n%s",
            state.src,
            state.dst,
            piece.letter,
            self._oracle.pretty_print(board),
        )
        try:
            move = self._oracle.validate_coordinate_move(
                state.src, state.dst, piece, board
            )
        except IllegalMoveError as exc:
            _LOGGER.warning("Illegal promotion (%s). Cancelling the move", exc)
            self._state = EMPTY
            return
        self._state = ApplicableMove(ApplicableKind.MANUAL, move)

    def cancel(self) -> None:
        """Drop whatever is being built."""
        self._state = EMPTY

    # ── Commit ───────────────────────────────────────────────────────────

    def finalize(self) -> MoveAction | None:
        """Advance after an animation has finished.

        ``PromotionPending`` becomes ``PromotionReady`` and yields nothing;
        an applicable move yields its action and resets the builder.
        """
        state = self._state
        if isinstance(state, PromotionPending):
            self._state = PromotionReady(state.src, state.dst)
            return None
        if isinstance(state, ApplicableMove):
            self._state = EMPTY
            return state.to_action()
        return None

    # ── Animations ───────────────────────────────────────────────────────

    def animations(self) -> list[AnimationPair]:
        return self._state.animations()

    def pending_animation_target(self, source: Coord) -> Coord | None:
        """Destination of the animation starting at *source*, if any."""
        for src, dst in self.animations():
            if src == source:
                return dst
        return None

    def animation_displacement(
        self, source: Coord, orientation: Color
    ) -> tuple[int, int] | None:
        """Offset of the piece on *source* in percent of a square.

        Positive x is rightwards and positive y upwards from the point of
        view of a player sitting on the *orientation* side.
        """
        dst = self.pending_animation_target(source)
        if dst is None:
            return None
        sign = 1 if orientation == Color.WHITE else -1
        return (
            sign * (dst.file - source.file) * 100,
            sign * (dst.rank - source.rank) * 100,
        )
