"""Cell value type and arena coordinate helpers.

Coordinates use (row, col) ordering consistent with NumPy indexing: rows
grow downward, columns grow to the right.
"""

from __future__ import annotations

from typing import NamedTuple

from egg_snake.errors import OutOfBounds

ARENA_SIZE = 10


class Cell(NamedTuple):
    """A single arena position."""

    row: int
    col: int


def in_bounds(row: int, col: int, size: int = ARENA_SIZE) -> bool:
    """Check whether a coordinate lies within a ``size``×``size`` arena."""
    return 0 <= row < size and 0 <= col < size


def encode(row: int, col: int, size: int = ARENA_SIZE) -> Cell:
    """Build a :class:`Cell`, raising :class:`OutOfBounds` when off-arena."""
    if not in_bounds(row, col, size):
        raise OutOfBounds(row, col, size)
    return Cell(row, col)


def decode(cell: Cell) -> tuple[int, int]:
    """Return the plain ``(row, col)`` pair of a cell."""
    return cell.row, cell.col


def is_adjacent(a: Cell, b: Cell) -> bool:
    """True iff the two cells are at Manhattan distance 1."""
    return abs(a.row - b.row) + abs(a.col - b.col) == 1
