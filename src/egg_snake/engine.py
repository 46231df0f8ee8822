"""Game state machine driving a single snake game."""

from __future__ import annotations

import enum
import logging

import numpy as np

from egg_snake.arena import Arena
from egg_snake.cell import Cell
from egg_snake.config import GameConfig
from egg_snake.egg import place_egg
from egg_snake.movement import Grow, Lost, TickResult, tick
from egg_snake.snake import (
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    Direction,
    parse_input,
    propose_direction,
    validate_snake,
)

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You win"
LOSE_MESSAGE = "You lose, try again"


class GameStatus(str, enum.Enum):
    """Lifecycle states of a game."""

    IDLE = "idle"
    RUNNING = "running"
    WON = "won"
    LOST = "lost"


class GameEngine:
    """Owns the snake, egg, scores and status of one player's game.

    The engine never schedules itself: a timer, event loop or test calls
    :meth:`on_tick` once per movement interval while the game is running,
    and input handlers call :meth:`request_direction` in between. Input only
    changes the pending direction used by the next tick.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )

        self._snake: tuple[Cell, ...] = INITIAL_SNAKE
        self._egg: Cell | None = None
        self._heading = INITIAL_DIRECTION
        self._pending_direction = INITIAL_DIRECTION
        self._status = GameStatus.IDLE
        self._score = 0
        self._best_score = 0
        self._ticks = 0
        self._message: str | None = None

    # --- read-only snapshot accessors ---

    @property
    def snake(self) -> tuple[Cell, ...]:
        """Snake cells, head first."""
        return self._snake

    @property
    def egg(self) -> Cell | None:
        return self._egg

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def heading(self) -> Direction:
        """Direction of the last completed move."""
        return self._heading

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def message(self) -> str | None:
        """User-facing result line, set once the game is won or lost."""
        return self._message

    @property
    def is_running(self) -> bool:
        return self._status == GameStatus.RUNNING

    # --- commands ---

    def start(self) -> None:
        """Begin a new run; does nothing if one is already running."""
        if self.is_running:
            return

        self._snake = INITIAL_SNAKE
        self._heading = INITIAL_DIRECTION
        self._pending_direction = INITIAL_DIRECTION
        self._score = 0
        self._ticks = 0
        self._message = None
        self._egg = place_egg(self._snake, self.config.arena_size, self.rng)
        self._status = GameStatus.RUNNING
        logger.info("Game started (best score %d).", self._best_score)

    def request_direction(self, raw: str | Direction) -> bool:
        """Steer the snake for the next tick.

        Unrecognised input, input outside a running game and reversals are
        ignored. Returns ``True`` if the pending direction was updated.
        """
        if not self.is_running:
            return False

        requested = parse_input(raw)
        if requested is None:
            logger.debug("Ignoring unrecognised input %r.", raw)
            return False

        accepted = propose_direction(self._snake[0], self._snake[1], requested)
        if accepted is None:
            logger.debug("Rejected reversal to %s.", requested.name)
            return False

        self._pending_direction = accepted
        return True

    def on_tick(self) -> TickResult | None:
        """Advance the game one step; returns ``None`` when not running."""
        if not self.is_running:
            return None

        result = tick(
            self._snake,
            self._pending_direction,
            self._egg,
            self.config.arena_size,
            self.rng,
        )
        self._ticks += 1

        if isinstance(result, Lost):
            logger.debug("Snake hit %s at tick %d.", result.reason, self._ticks)
            self._finish(GameStatus.LOST)
            return result

        validate_snake(result.snake, self.config.arena_size)
        self._snake = result.snake
        self._heading = self._pending_direction
        if isinstance(result, Grow):
            self._egg = result.egg
            self._score += 1
            if result.arena_full:
                self._finish(GameStatus.WON)
        return result

    def abort(self) -> None:
        """End a running game as lost without moving the snake."""
        if self.is_running:
            self._finish(GameStatus.LOST)

    def get_state(self) -> dict:
        """Return a JSON-serializable snapshot of the game."""
        return {
            "status": self._status.value,
            "tick": self._ticks,
            "score": self._score,
            "best_score": self._best_score,
            "message": self._message,
            "heading": self._heading.name.lower(),
            "snake": [list(c) for c in self._snake],
            "egg": list(self._egg) if self._egg is not None else None,
            "arena": Arena(
                self._snake, self._egg, self.config.arena_size,
            ).to_dict(),
        }

    def _finish(self, status: GameStatus) -> None:
        """Freeze the game in a terminal state and update the best score."""
        self._status = status
        self._message = WIN_MESSAGE if status == GameStatus.WON else LOSE_MESSAGE
        if self._score > self._best_score:
            self._best_score = self._score
        logger.info(
            "Game %s at tick %d with score %d (best %d).",
            status.value, self._ticks, self._score, self._best_score,
        )
