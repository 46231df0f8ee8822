"""Tests for the Cell model."""

import pytest

from egg_snake.cell import ARENA_SIZE, Cell, decode, encode, in_bounds, is_adjacent
from egg_snake.errors import EggSnakeError, OutOfBounds


class TestEncode:
    def test_encode_corners(self):
        assert encode(0, 0) == Cell(0, 0)
        assert encode(9, 9) == Cell(9, 9)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (10, 0), (0, 10)])
    def test_out_of_bounds(self, row, col):
        with pytest.raises(OutOfBounds, match="outside"):
            encode(row, col)

    def test_out_of_bounds_is_value_error(self):
        with pytest.raises(ValueError):
            encode(ARENA_SIZE, 0)
        with pytest.raises(EggSnakeError):
            encode(0, ARENA_SIZE)

    def test_custom_size(self):
        assert encode(3, 3, size=4) == Cell(3, 3)
        with pytest.raises(OutOfBounds):
            encode(4, 0, size=4)

    def test_decode(self):
        assert decode(encode(3, 7)) == (3, 7)


class TestCellValue:
    def test_equality_and_hashing(self):
        assert Cell(1, 2) == Cell(1, 2)
        assert Cell(1, 2) in {Cell(1, 2), Cell(2, 1)}
        assert Cell(1, 2) != Cell(2, 1)

    def test_ordering(self):
        assert Cell(0, 9) < Cell(1, 0)

    def test_in_bounds(self):
        assert in_bounds(0, 0)
        assert in_bounds(9, 9)
        assert not in_bounds(-1, 5)
        assert not in_bounds(5, 10)


class TestAdjacency:
    def test_orthogonal_neighbours(self):
        c = Cell(5, 5)
        for other in (Cell(4, 5), Cell(6, 5), Cell(5, 4), Cell(5, 6)):
            assert is_adjacent(c, other)

    def test_not_adjacent(self):
        c = Cell(5, 5)
        assert not is_adjacent(c, c)
        assert not is_adjacent(c, Cell(6, 6))
        assert not is_adjacent(c, Cell(5, 7))
