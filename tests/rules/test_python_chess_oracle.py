"""Tests for the python-chess backed rules oracle."""

import chess
import pytest

from chesspad.core import STARTING_FEN
from chesspad.core.enums import Color, MoveKind, PieceKind
from chesspad.core.errors import (
    ActionParseError,
    IllegalMoveError,
    MoveApplicationError,
    PositionParseError,
)
from chesspad.core.move import Move
from chesspad.core.types import A7, A8, E1, E2, E4, E5, G1, H1, Coord
from chesspad.rules.python_chess import PythonChessOracle

CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"
EN_PASSANT_FEN = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"
PROMOTION_FEN = "1k6/P7/8/8/8/8/8/K7 w - - 0 1"


@pytest.fixture
def start(oracle: PythonChessOracle) -> chess.Board:
    return oracle.parse_position(STARTING_FEN)


class TestPositions:
    def test_parse_and_fen_round_trip(self, oracle: PythonChessOracle) -> None:
        board = oracle.parse_position(CASTLING_FEN)
        assert oracle.to_fen(board) == CASTLING_FEN

    @pytest.mark.parametrize(
        "fen",
        [
            "not a fen",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            # no black king
            "8/8/8/8/8/8/8/4K3 w - - 0 1",
        ],
    )
    def test_invalid_positions_rejected(self, oracle: PythonChessOracle, fen: str) -> None:
        with pytest.raises(PositionParseError) as exc_info:
            oracle.parse_position(fen)
        assert exc_info.value.fen == fen

    def test_position_error_is_value_error(self, oracle: PythonChessOracle) -> None:
        with pytest.raises(ValueError):
            oracle.parse_position("garbage")

    def test_apply_move_returns_new_board(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        move = oracle.validate_uci("e2e4", start)
        after = oracle.apply_move(start, move)
        assert after is not start
        assert oracle.to_fen(start) == STARTING_FEN
        assert oracle.side_to_move(after) == Color.BLACK
        assert oracle.cell_at(after, E4) == (PieceKind.PAWN, Color.WHITE)

    def test_apply_illegal_move_raises(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        with pytest.raises(MoveApplicationError):
            oracle.apply_move(start, Move(E2, E5))


class TestValidation:
    def test_coordinate_move_classifies_double_push(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        move = oracle.validate_coordinate_move(E2, E4, None, start)
        assert move == Move(E2, E4, MoveKind.PAWN_DOUBLE)

    def test_coordinate_move_rejects_illegal(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        with pytest.raises(IllegalMoveError):
            oracle.validate_coordinate_move(E2, E5, None, start)

    def test_promotion_without_piece_is_illegal(self, oracle: PythonChessOracle) -> None:
        board = oracle.parse_position(PROMOTION_FEN)
        with pytest.raises(IllegalMoveError):
            oracle.validate_coordinate_move(A7, A8, None, board)
        move = oracle.validate_coordinate_move(A7, A8, PieceKind.ROOK, board)
        assert move.kind == MoveKind.PROMOTE_ROOK

    def test_castling_kinds(self, oracle: PythonChessOracle) -> None:
        board = oracle.parse_position(CASTLING_FEN)
        assert oracle.validate_san("O-O", board) == Move(E1, G1, MoveKind.CASTLE_KINGSIDE)
        assert oracle.validate_uci("e1c1", board).kind == MoveKind.CASTLE_QUEENSIDE

    def test_coordinate_castle_names_king_target(self, oracle: PythonChessOracle) -> None:
        board = oracle.parse_position(CASTLING_FEN)
        move = oracle.validate_coordinate_move(E1, G1, None, board)
        assert move == Move(E1, G1, MoveKind.CASTLE_KINGSIDE)
        with pytest.raises(IllegalMoveError):
            oracle.validate_coordinate_move(E1, H1, None, board)

    def test_en_passant_kind(self, oracle: PythonChessOracle) -> None:
        board = oracle.parse_position(EN_PASSANT_FEN)
        assert oracle.validate_san("exd6", board).kind == MoveKind.EN_PASSANT

    def test_normal_kind(self, oracle: PythonChessOracle, start: chess.Board) -> None:
        assert oracle.validate_san("Nf3", start).kind == MoveKind.NORMAL

    @pytest.mark.parametrize("text", ["e2e5", "zz", "0000", ""])
    def test_bad_uci_raises_action_parse_error(
        self, oracle: PythonChessOracle, start: chess.Board, text: str
    ) -> None:
        with pytest.raises(ActionParseError):
            oracle.validate_uci(text, start)

    @pytest.mark.parametrize("text", ["Ke2", "Nf6", "hello", "--"])
    def test_bad_san_raises_action_parse_error(
        self, oracle: PythonChessOracle, start: chess.Board, text: str
    ) -> None:
        with pytest.raises(ActionParseError):
            oracle.validate_san(text, start)


class TestRendering:
    def test_render_uci_inverts_validate_uci(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        for text in ("e2e4", "g1f3", "b1c3", "d2d3"):
            move = oracle.validate_uci(text, start)
            assert oracle.render_uci(move, start) == text

    def test_render_san(self, oracle: PythonChessOracle) -> None:
        board = oracle.parse_position(PROMOTION_FEN)
        move = oracle.validate_uci("a7a8q", board)
        assert oracle.render_san(move, board) == "a8=Q+"

    def test_pretty_print_uses_dots(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        text = oracle.pretty_print(start)
        assert len(text.splitlines()) == 8
        assert "." in text


class TestQueries:
    def test_cell_at_empty(self, oracle: PythonChessOracle, start: chess.Board) -> None:
        assert oracle.cell_at(start, E4) is None

    def test_legal_destinations_for_knight(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        targets = oracle.legal_destinations(start, G1)
        assert targets == {Coord.parse("f3"), Coord.parse("h3")}

    def test_legal_destinations_of_empty_square(
        self, oracle: PythonChessOracle, start: chess.Board
    ) -> None:
        assert oracle.legal_destinations(start, E4) == set()
