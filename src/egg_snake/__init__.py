"""Egg Snake — single-player grid snake game engine."""

from egg_snake.cell import ARENA_SIZE, Cell, decode, encode, is_adjacent
from egg_snake.config import GameConfig
from egg_snake.egg import place_egg
from egg_snake.engine import GameEngine, GameStatus
from egg_snake.errors import EggSnakeError, InvalidSnake, OutOfBounds
from egg_snake.movement import Continue, Grow, Lost, TickResult, tick
from egg_snake.snake import Direction, parse_input, propose_direction

__all__ = [
    "ARENA_SIZE",
    "Cell",
    "Continue",
    "Direction",
    "EggSnakeError",
    "GameConfig",
    "GameEngine",
    "GameStatus",
    "Grow",
    "InvalidSnake",
    "Lost",
    "OutOfBounds",
    "TickResult",
    "decode",
    "encode",
    "is_adjacent",
    "parse_input",
    "place_egg",
    "propose_direction",
    "tick",
]
