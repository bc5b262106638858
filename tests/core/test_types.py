"""Tests for Square and coordinate helpers."""

import pytest

from chessmoves.core.types import (
    A1, E4, H8,
    ALL_SQUARES,
    Square,
    on_board,
)


class TestSquare:
    def test_named_constants(self) -> None:
        assert A1 == Square(1, 1)
        assert E4 == Square(4, 5)
        assert H8 == Square(8, 8)

    def test_name(self) -> None:
        assert Square(1, 1).name == "a1"
        assert Square(4, 5).name == "e4"
        assert str(H8) == "h8"

    def test_ordering_by_row_then_col(self) -> None:
        assert Square(1, 8) < Square(2, 1)
        assert Square(3, 2) < Square(3, 3)
        assert sorted([H8, E4, A1]) == [A1, E4, H8]

    def test_hashable(self) -> None:
        assert len({Square(4, 4), Square(4, 4), Square(4, 5)}) == 2

    @pytest.mark.parametrize("row, col", [(0, 1), (1, 0), (9, 4), (4, 9), (-1, -1)])
    def test_out_of_range_raises(self, row: int, col: int) -> None:
        with pytest.raises(ValueError, match="Square out of range"):
            Square(row, col)

    def test_index_round_trip_covers_board(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert [sq.index for sq in ALL_SQUARES] == list(range(64))
        assert Square.from_index(28) == E4

    def test_from_index_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="index out of range"):
            Square.from_index(64)

    def test_offset(self) -> None:
        assert E4.offset(1, -1) == Square(5, 4)
        assert H8.offset(1, 0) is None
        assert A1.offset(0, -1) is None

    def test_mirrored(self) -> None:
        assert A1.mirrored() == Square(8, 1)
        assert E4.mirrored() == Square(5, 5)

    def test_on_board(self) -> None:
        assert on_board(1, 8)
        assert not on_board(0, 8)
        assert not on_board(8, 9)
