"""Snake shape, directions, and input mapping."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from egg_snake.cell import ARENA_SIZE, Cell, in_bounds, is_adjacent
from egg_snake.errors import InvalidSnake


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


# Pairs that would cause an instant 180° reversal.
OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS: dict[tuple[int, int], Direction] = {d.value: d for d in Direction}

# Keyboard keys and plain words accepted as steering input.
_INPUT_MAP: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

# Head first, tail last.
INITIAL_SNAKE: tuple[Cell, ...] = (Cell(0, 1), Cell(0, 0))
INITIAL_DIRECTION = Direction.RIGHT


def heading(head: Cell, neck: Cell) -> Direction:
    """Return the direction of travel implied by the neck -> head vector."""
    delta = (head.row - neck.row, head.col - neck.col)
    try:
        return _DELTAS[delta]
    except KeyError:
        raise InvalidSnake(
            f"Head {tuple(head)} is not adjacent to neck {tuple(neck)}.",
        ) from None


def propose_direction(
    head: Cell, neck: Cell, requested: Direction,
) -> Direction | None:
    """Accept *requested* unless it reverses the snake into its own neck.

    Returns the accepted direction, or ``None`` when the request is rejected.
    """
    if OPPOSITES[requested] == heading(head, neck):
        return None
    return requested


def parse_input(raw: str | Direction | None) -> Direction | None:
    """Map a key name or word to a direction; unknown input gives ``None``."""
    if isinstance(raw, Direction):
        return raw
    if not isinstance(raw, str):
        return None
    return _INPUT_MAP.get(raw.strip().lower())


def next_head(head: Cell, direction: Direction) -> tuple[int, int]:
    """Shift *head* one step; the result may lie outside the arena."""
    dr, dc = direction.value
    return head.row + dr, head.col + dc


def validate_snake(snake: Sequence[Cell], size: int = ARENA_SIZE) -> None:
    """Raise :class:`InvalidSnake` if *snake* breaks a shape invariant."""
    if len(snake) < 2:
        raise InvalidSnake("Snake length must be at least 2.")
    if len(snake) > size * size:
        raise InvalidSnake("Snake is longer than the arena has cells.")
    if len(set(snake)) != len(snake):
        raise InvalidSnake("Snake cells must be distinct.")
    for cell in snake:
        if not in_bounds(cell.row, cell.col, size):
            raise InvalidSnake(f"Snake cell {tuple(cell)} is off the arena.")
    for a, b in zip(snake, snake[1:]):
        if not is_adjacent(a, b):
            raise InvalidSnake(
                f"Cells {tuple(a)} and {tuple(b)} are not adjacent.",
            )
