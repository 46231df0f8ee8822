"""Game and service configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from egg_snake.cell import ARENA_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by the engine, the session service and the CLI.

    Supports JSON serialization for reproducible runs.
    """

    arena_size: int = ARENA_SIZE
    tick_interval_ms: int = 600
    seed: int | None = None

    def __post_init__(self) -> None:
        if not 2 <= self.arena_size <= 64:
            raise ValueError("arena_size must be between 2 and 64.")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be positive.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
