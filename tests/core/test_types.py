"""Tests for Coord and the named square constants."""

import pytest

from chesspad.core.types import A1, E4, H8, Coord, all_coords


class TestCoord:
    def test_parse_round_trips_name(self) -> None:
        assert Coord.parse("e4") == E4
        assert E4.name == "e4"
        assert str(H8) == "h8"

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            Coord.parse(name)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            Coord(8, 0)
        with pytest.raises(ValueError):
            Coord(0, -1)

    def test_index_mapping(self) -> None:
        assert A1.index == 0
        assert H8.index == 63
        assert Coord.from_index(28) == E4

    def test_from_index_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Coord.from_index(64)

    def test_with_file(self) -> None:
        assert E4.with_file(0) == Coord.parse("a4")

    def test_hashable_and_ordered(self) -> None:
        assert {E4, Coord(4, 3)} == {E4}
        assert A1 < H8


def test_all_coords_lists_every_square_once() -> None:
    coords = all_coords()
    assert len(coords) == 64
    assert len(set(coords)) == 64
    assert coords[0] == A1
