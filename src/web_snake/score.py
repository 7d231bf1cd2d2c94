"""Current score and persisted high score."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "high"


class HighScoreStore(Protocol):
    """Key-value slot storage the score tracker persists into."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store that lives for the process lifetime."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Store backed by a single JSON object on disk.

    The file is read on every ``get`` and rewritten on every ``set``. A
    missing, unreadable, or corrupt file reads as empty. Writes go to a
    sibling temp file that then replaces the original; a failed write is
    logged and dropped, leaving callers with their in-memory value.

    Both operations are synchronous file I/O. The file holds one small
    object, so the brief block on the event loop is accepted.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable store file %s.", self.path)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring non-object store file %s.", self.path)
            return {}
        return raw

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data), encoding="utf-8")
            tmp.replace(self.path)
        except OSError:
            logger.warning(
                "Failed writing store file %s; keeping value in memory.",
                self.path,
            )


def parse_high_score(raw: str | None) -> int | None:
    """Return the stored value as a non-negative int, or None if invalid."""
    if raw is None:
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        return None
    return value if value >= 0 else None


class ScoreTracker:
    """Holds the current score and keeps the stored high score up to date.

    The stored value is read once at construction. Every call to
    :meth:`record` that beats it (or finds no valid value) writes it back.
    """

    def __init__(
        self, store: HighScoreStore | None = None, key: str = HIGH_SCORE_KEY,
    ) -> None:
        self.store: HighScoreStore = store if store is not None else MemoryStore()
        self.key = key
        self.score = 0
        raw = self.store.get(key)
        self._high = parse_high_score(raw)
        if self._high is None and raw is not None:
            logger.warning("Stored high score %r is invalid; treating as unset.", raw)

    @property
    def high_score(self) -> int:
        return self._high if self._high is not None else 0

    def record(self, score: int) -> None:
        """Set the current score, raising the high score if exceeded."""
        if score < 0:
            raise ValueError("Score must be non-negative.")
        self.score = score
        if self._high is None or score > self._high:
            self._high = score
            self.store.set(self.key, str(score))
            if score > 0:
                logger.info("New high score: %d.", score)

    def reset(self) -> None:
        """Zero the current score for a new game."""
        self.record(0)
