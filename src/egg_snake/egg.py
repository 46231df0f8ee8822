"""Egg placement logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from egg_snake.arena import Arena
from egg_snake.cell import ARENA_SIZE, Cell

logger = logging.getLogger(__name__)


def place_egg(
    snake: Sequence[Cell],
    arena_size: int = ARENA_SIZE,
    rng: np.random.Generator | None = None,
) -> Cell | None:
    """Pick a uniformly random cell not occupied by *snake*.

    Returns ``None`` when the snake covers the whole arena. Pass a seeded
    NumPy generator for reproducible placement.
    """
    arena = Arena(snake, size=arena_size)
    if arena.is_full():
        logger.debug("No free cell left for an egg (snake length %d).", len(snake))
        return None

    free = arena.free_cells()
    if rng is None:
        rng = np.random.default_rng()
    return free[int(rng.integers(len(free)))]
