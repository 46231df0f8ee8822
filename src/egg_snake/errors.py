"""Exception types raised by the game core."""

from __future__ import annotations


class EggSnakeError(Exception):
    """Base class for all game errors."""


class OutOfBounds(EggSnakeError, ValueError):
    """A cell was built from coordinates outside the arena."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) lies outside the {size}×{size} arena.",
        )
        self.row = row
        self.col = col
        self.size = size


class InvalidSnake(EggSnakeError, ValueError):
    """A snake body violates its shape invariants."""
