"""Runtime configuration for the snake server."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from web_snake.scheduler import TICK_RATE_MS
from web_snake.score import HIGH_SCORE_KEY, HighScoreStore, JsonFileStore, MemoryStore

logger = logging.getLogger(__name__)

DEFAULT_AVATAR = "👶🏽"


@dataclass(frozen=True)
class GameConfig:
    """Server settings.

    Supports JSON serialization. Board size is fixed and not configurable.
    """

    # Persistence; None keeps the high score in memory only.
    high_score_path: str | None = None
    high_score_key: str = HIGH_SCORE_KEY

    # Randomness; None seeds from OS entropy.
    seed: int | None = None

    # Timing
    tick_rate_ms: int = TICK_RATE_MS

    # Cosmetic
    avatar: str = DEFAULT_AVATAR

    def build_store(self) -> HighScoreStore:
        """Return the high-score store these settings describe."""
        if self.high_score_path is None:
            return MemoryStore()
        return JsonFileStore(self.high_score_path)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(**raw)
