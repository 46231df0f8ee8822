"""Board rendering helpers for clients that draw the arena."""

from __future__ import annotations

from collections.abc import Sequence

from egg_snake.arena import Arena, CellType
from egg_snake.cell import ARENA_SIZE, Cell
from egg_snake.snake import Direction, heading

_HEAD_GLYPHS: dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}

_BODY_GLYPHS: dict[str, str] = {
    "vertical": "│",
    "horizontal": "─",
    "down-right": "┌",
    "down-left": "┐",
    "up-right": "└",
    "up-left": "┘",
}

_SIDE_ORDER = ("up", "down", "left", "right")

EMPTY_GLYPH = "."
EGG_GLYPH = "@"
TAIL_GLYPH = "o"


def _side(cell: Cell, neighbour: Cell) -> str:
    """Name the side of *cell* that touches *neighbour*."""
    return heading(neighbour, cell).name.lower()


def segment_shapes(
    snake: Sequence[Cell], head_direction: Direction | None = None,
) -> list[str]:
    """Describe how each snake segment should be drawn.

    The head is ``"head-<dir>"`` and the tail ``"tail-<dir>"``, where
    ``<dir>`` is the way the segment points. Body segments are
    ``"vertical"``, ``"horizontal"`` or a corner named by the two sides it
    joins, such as ``"up-left"``.
    """
    if len(snake) < 2:
        raise ValueError("Snake must have at least two cells to render.")

    if head_direction is None:
        head_direction = heading(snake[0], snake[1])
    shapes = [f"head-{head_direction.name.lower()}"]

    for prev, cell, nxt in zip(snake, snake[1:], snake[2:]):
        sides = {_side(cell, prev), _side(cell, nxt)}
        if sides == {"up", "down"}:
            shapes.append("vertical")
        elif sides == {"left", "right"}:
            shapes.append("horizontal")
        else:
            shapes.append("-".join(s for s in _SIDE_ORDER if s in sides))

    tail_direction = heading(snake[-1], snake[-2])
    shapes.append(f"tail-{tail_direction.name.lower()}")
    return shapes


def render_text(
    snake: Sequence[Cell],
    egg: Cell | None,
    size: int = ARENA_SIZE,
    head_direction: Direction | None = None,
) -> str:
    """Draw the arena as lines of text, one character per cell."""
    arena = Arena(snake, egg, size)
    rows = [
        [
            EGG_GLYPH if arena.get(r, c) == CellType.EGG else EMPTY_GLYPH
            for c in range(size)
        ]
        for r in range(size)
    ]

    for cell, shape in zip(
        snake, segment_shapes(snake, head_direction), strict=True,
    ):
        if shape.startswith("head-"):
            glyph = _HEAD_GLYPHS[Direction[shape[5:].upper()]]
        elif shape.startswith("tail-"):
            glyph = TAIL_GLYPH
        else:
            glyph = _BODY_GLYPHS[shape]
        rows[cell.row][cell.col] = glyph

    return "\n".join("".join(r) for r in rows)
