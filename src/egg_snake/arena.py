"""Occupancy grid for the snake arena."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from egg_snake.cell import ARENA_SIZE, Cell


class CellType(enum.IntEnum):
    """Integer codes stored in the arena array."""

    EMPTY = 0
    SNAKE = 1
    EGG = 2


class Arena:
    """NumPy-backed square arena painted from a snake and an egg.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    """

    def __init__(
        self,
        snake: Iterable[Cell] = (),
        egg: Cell | None = None,
        size: int = ARENA_SIZE,
    ) -> None:
        if size < 2:
            raise ValueError("Arena size must be at least 2.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)
        for row, col in snake:
            self.cells[row, col] = CellType.SNAKE
        if egg is not None:
            self.cells[egg.row, egg.col] = CellType.EGG

    def get(self, row: int, col: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[row, col])

    def free_cells(self) -> list[Cell]:
        """Return every cell not covered by the snake, in row-major order."""
        rows, cols = np.where(self.cells != CellType.SNAKE)
        return [
            Cell(r, c)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def is_full(self) -> bool:
        return not np.any(self.cells != CellType.SNAKE)

    def to_dict(self) -> dict:
        """Serialize arena state to a dictionary."""
        return {
            "size": self.size,
            "cells": self.cells.tolist(),
        }
