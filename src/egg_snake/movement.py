"""Pure per-tick movement and collision resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np

from egg_snake.cell import ARENA_SIZE, Cell, in_bounds
from egg_snake.egg import place_egg
from egg_snake.snake import Direction, next_head


@dataclass(frozen=True)
class Continue:
    """The snake moved one cell without eating."""

    snake: tuple[Cell, ...]


@dataclass(frozen=True)
class Grow:
    """The snake ate the egg and grew by one cell.

    ``arena_full`` is set when no cell is left for a new egg, which is the
    win condition; ``egg`` is ``None`` in that case.
    """

    snake: tuple[Cell, ...]
    egg: Cell | None
    arena_full: bool = False


@dataclass(frozen=True)
class Lost:
    """The snake hit a wall or its own body."""

    reason: Literal["wall", "self"]


TickResult = Continue | Grow | Lost


def tick(
    snake: tuple[Cell, ...],
    direction: Direction,
    egg: Cell | None,
    arena_size: int = ARENA_SIZE,
    rng: np.random.Generator | None = None,
) -> TickResult:
    """Advance *snake* one cell in *direction* and classify the outcome.

    The tail is dropped before the collision check, so the head may move
    into the cell the tail is leaving this tick.
    """
    tail = snake[-1]
    body = snake[:-1]

    row, col = next_head(snake[0], direction)
    if not in_bounds(row, col, arena_size):
        return Lost("wall")

    new_head = Cell(row, col)
    if new_head in body:
        return Lost("self")

    moved = (new_head, *body)
    if new_head != egg:
        return Continue(moved)

    grown = (*moved, tail)
    new_egg = place_egg(grown, arena_size, rng)
    return Grow(grown, new_egg, arena_full=new_egg is None)
