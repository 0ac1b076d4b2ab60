"""Tests for ChessboardController — the view-facing glue."""

import pytest

from chesspad.board.action import Action, ActionSequencer
from chesspad.board.client import ChessboardClient
from chesspad.board.config import ChessboardConfig
from chesspad.board.controller import ChessboardController
from chesspad.builder.state import PromotionReady
from chesspad.core.channels import QueueChannel
from chesspad.core.enums import Color, PieceKind
from chesspad.core.errors import PositionParseError
from chesspad.core.types import E2, E4, E7, E8, G1, Coord
from chesspad.history.events import BoardAction, BoardActionKind

PROMOTION_FEN = "8/4P3/k7/8/8/8/8/4K3 w - - 0 1"
BLACK_PROMOTION_FEN = "4k3/8/8/8/8/8/4p3/K7 b - - 0 1"


def _controller(
    sequencer: ActionSequencer, *, animate: bool = False, **config: object
) -> ChessboardController:
    return ChessboardController(
        ChessboardConfig(animate_moves=animate, **config),  # type: ignore[arg-type]
        sequencer=sequencer,
    )


class TestConstruction:
    def test_defaults(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer)
        assert ctrl.orientation == Color.WHITE
        assert ctrl.is_interactive
        assert ctrl.piece_at(E2) == (PieceKind.PAWN, Color.WHITE)
        assert ctrl.last_move is None

    def test_invalid_starting_position(self, sequencer: ActionSequencer) -> None:
        with pytest.raises(PositionParseError):
            _controller(sequencer, starting_position="nope")

    def test_orientation_follows_player_color(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer, player_color=Color.BLACK)
        assert ctrl.orientation == Color.BLACK
        ctrl.flip()
        assert ctrl.orientation == Color.WHITE


class TestClicks:
    def test_click_move_without_animation(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer)
        changes: list[bool] = []
        ctrl.events.on_changed.append(lambda: changes.append(True))

        ctrl.on_square_clicked(E2)
        assert ctrl.selected_square == E2
        assert ctrl.legal_destinations() == {Coord.parse("e3"), E4}

        ctrl.on_square_clicked(E4)
        assert ctrl.history.moves_san() == ["e4"]
        assert ctrl.selected_square is None
        assert ctrl.last_move is not None and ctrl.last_move.dst == E4
        assert len(changes) == 2

    def test_click_move_waits_for_animation(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer, animate=True)
        ctrl.on_square_clicked(G1)
        ctrl.on_square_clicked(Coord.parse("f3"))

        assert ctrl.animations == [(G1, Coord.parse("f3"))]
        # The piece is in flight, so nothing is highlighted.
        assert ctrl.selected_square is None
        assert ctrl.history.moves_san() == []

        ctrl.on_animation_finished()
        assert ctrl.animations == []
        assert ctrl.history.moves_san() == ["Nf3"]

    def test_clicks_ignored_when_not_interactive(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer, is_interactive=False)
        ctrl.on_square_clicked(E2)
        assert ctrl.selected_square is None

    def test_set_interactive_false_cancels_selection(
        self, sequencer: ActionSequencer
    ) -> None:
        ctrl = _controller(sequencer)
        ctrl.on_square_clicked(E2)
        ctrl.set_interactive(False)
        assert ctrl.selected_square is None
        assert not ctrl.is_interactive

    def test_single_player_blocks_opponent_turn(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer, single_player_mode=True)
        ctrl.on_square_clicked(E2)
        ctrl.on_square_clicked(E4)
        assert not ctrl.is_interactive

        ctrl.on_square_clicked(E7)
        assert ctrl.selected_square is None

    def test_past_positions_are_read_only(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer)
        ctrl.dispatch(Action.make_move("e4", sequencer=sequencer))
        ctrl.dispatch(Action.step_back(sequencer=sequencer))
        assert not ctrl.is_interactive

        ctrl.on_square_clicked(E2)
        assert ctrl.selected_square is None


class TestPromotion:
    def test_white_promotion_flow(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer, starting_position=PROMOTION_FEN)
        ctrl.on_square_clicked(E7)
        ctrl.on_square_clicked(E8)

        assert isinstance(ctrl.builder_state, PromotionReady)
        assert ctrl.promotion_request == (E7, E8)
        assert ctrl.promoting_color() == Color.WHITE
        assert ctrl.promotion_pieces() == [
            PieceKind.QUEEN,
            PieceKind.KNIGHT,
            PieceKind.ROOK,
            PieceKind.BISHOP,
        ]

        ctrl.on_promotion_piece_clicked(PieceKind.ROOK)
        assert ctrl.history.moves_san() == ["e8=R"]
        assert ctrl.piece_at(E8) == (PieceKind.ROOK, Color.WHITE)

    def test_picker_order_reverses_toward_bottom_edge(
        self, sequencer: ActionSequencer
    ) -> None:
        ctrl = _controller(sequencer, starting_position=BLACK_PROMOTION_FEN)
        ctrl.on_square_clicked(E2)
        ctrl.on_square_clicked(Coord.parse("e1"))

        assert ctrl.promoting_color() == Color.BLACK
        assert ctrl.promotion_pieces() == [
            PieceKind.BISHOP,
            PieceKind.ROOK,
            PieceKind.KNIGHT,
            PieceKind.QUEEN,
        ]

        ctrl.flip()
        assert ctrl.promotion_pieces()[0] == PieceKind.QUEEN

    def test_cancel_promotion(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer, starting_position=PROMOTION_FEN)
        ctrl.on_square_clicked(E7)
        ctrl.on_square_clicked(E8)
        ctrl.on_promotion_cancelled()

        assert ctrl.promotion_request is None
        assert ctrl.promotion_pieces() == []
        assert ctrl.history.moves_san() == []


class TestDispatch:
    def test_duplicate_delivery_applies_once(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer)
        action = Action.make_move("e4", sequencer=sequencer)

        assert ctrl.dispatch(action)
        assert not ctrl.dispatch(action)
        assert ctrl.history.moves_san() == ["e4"]

    def test_navigation_round_trip(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer)
        for san in ("e4", "e5", "Nf3"):
            ctrl.dispatch(Action.make_move(san, sequencer=sequencer))

        ctrl.dispatch(Action.set_start(sequencer=sequencer))
        assert ctrl.history.step_pointer == 0
        ctrl.dispatch(Action.step_forward(sequencer=sequencer))
        assert ctrl.history.step_pointer == 1
        ctrl.dispatch(Action.set_end(sequencer=sequencer))
        assert ctrl.history.is_viewing_latest
        ctrl.dispatch(Action.revert_move(sequencer=sequencer))
        assert ctrl.history.moves_san() == ["e4", "e5"]

    def test_reports_reach_channel(self, sequencer: ActionSequencer) -> None:
        report: QueueChannel[BoardAction] = QueueChannel()
        ctrl = ChessboardController(
            ChessboardConfig(animate_moves=False), report=report, sequencer=sequencer
        )
        ctrl.dispatch(Action.make_move("d4", sequencer=sequencer))
        ctrl.dispatch(Action.step_back(sequencer=sequencer))

        kinds = [a.kind for a in report.drain()]
        assert kinds == [BoardActionKind.APPLY, BoardActionKind.STEP_BACK]

    def test_attach_report_later(self, sequencer: ActionSequencer) -> None:
        ctrl = _controller(sequencer)
        report: QueueChannel[BoardAction] = QueueChannel()
        ctrl.attach_report(report)
        ctrl.dispatch(Action.set_start(sequencer=sequencer))
        assert len(report) == 1

    def test_poll_actions_drains_client(self, sequencer: ActionSequencer) -> None:
        client = ChessboardClient(sequencer)
        ctrl = ChessboardController(ChessboardConfig(animate_moves=False), client=client)
        client.make_move("e4")
        client.make_move("c5")

        assert ctrl.poll_actions() == 2
        assert ctrl.history.moves_san() == ["e4", "c5"]
        assert ctrl.poll_actions() == 0

    def test_poll_without_client(self, sequencer: ActionSequencer) -> None:
        assert _controller(sequencer).poll_actions() == 0

    def test_injected_moves_ignored_when_not_interactive(
        self, sequencer: ActionSequencer
    ) -> None:
        ctrl = _controller(sequencer, is_interactive=False)
        ctrl.dispatch(Action.make_move("e4", sequencer=sequencer))
        assert ctrl.history.moves_san() == []
