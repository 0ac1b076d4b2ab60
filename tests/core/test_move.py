"""Tests for Move, SanMove, and the core enums."""

import pytest

from chesspad.core.enums import Color, MoveKind, PieceKind
from chesspad.core.move import Move, SanMove
from chesspad.core.types import E1, E2, E4, E7, E8, G1


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_last_rank(self) -> None:
        assert Color.WHITE.last_rank == 7
        assert Color.BLACK.last_rank == 0

    def test_str_is_lower_case(self) -> None:
        assert str(Color.BLACK) == "black"


class TestMoveKind:
    def test_castling_kinds(self) -> None:
        assert MoveKind.CASTLE_KINGSIDE.is_castling
        assert MoveKind.CASTLE_QUEENSIDE.is_castling
        assert not MoveKind.NORMAL.is_castling

    def test_promotion_piece(self) -> None:
        assert MoveKind.PROMOTE_KNIGHT.promotion_piece == PieceKind.KNIGHT
        assert MoveKind.EN_PASSANT.promotion_piece is None
        assert MoveKind.PROMOTE_QUEEN.is_promotion

    def test_promotion_to(self) -> None:
        assert MoveKind.promotion_to(PieceKind.ROOK) == MoveKind.PROMOTE_ROOK

    @pytest.mark.parametrize("piece", [PieceKind.PAWN, PieceKind.KING])
    def test_promotion_to_rejects_unpromotable(self, piece: PieceKind) -> None:
        with pytest.raises(ValueError):
            MoveKind.promotion_to(piece)


class TestMove:
    def test_uci(self) -> None:
        assert Move(E2, E4, MoveKind.PAWN_DOUBLE).uci == "e2e4"

    def test_uci_with_promotion(self) -> None:
        move = Move(E7, E8, MoveKind.PROMOTE_QUEEN)
        assert move.uci == "e7e8q"
        assert move.promotion == PieceKind.QUEEN

    def test_reversed_swaps_squares_and_keeps_kind(self) -> None:
        move = Move(E1, G1, MoveKind.CASTLE_KINGSIDE)
        back = move.reversed()
        assert back.src == G1
        assert back.dst == E1
        assert back.kind == MoveKind.CASTLE_KINGSIDE

    def test_replayed_is_equal_copy(self) -> None:
        move = Move(E2, E4, MoveKind.PAWN_DOUBLE)
        assert move.replayed() == move

    def test_frozen(self) -> None:
        move = Move(E2, E4)
        with pytest.raises(AttributeError):
            move.src = E1  # type: ignore[misc]


def test_san_move_str() -> None:
    assert str(SanMove("Nf3", PieceKind.KNIGHT, Color.WHITE)) == "white knight Nf3"
