"""Keyboard-to-direction mapping."""

from __future__ import annotations

from web_snake.snake import Direction

_ARROW_KEYS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowRight": Direction.RIGHT,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
}

_LETTER_KEYS: dict[str, Direction] = {
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
}


def key_to_direction(key: str) -> Direction | None:
    """Map a key identifier to a direction, or None for unrecognized keys.

    Letter keys are case-insensitive; arrow keys use browser key names.
    """
    if key in _ARROW_KEYS:
        return _ARROW_KEYS[key]
    return _LETTER_KEYS.get(key.lower())


class InputController:
    """Holds the most recently pressed direction.

    Presses between ticks overwrite each other; nothing is queued and
    reversals are not filtered.
    """

    def __init__(self, direction: Direction = Direction.RIGHT) -> None:
        self.direction = direction

    def press(self, key: str) -> bool:
        """Register a key-down event. Returns True if the key was mapped."""
        direction = key_to_direction(key)
        if direction is None:
            return False
        self.direction = direction
        return True

    def reset(self, direction: Direction = Direction.RIGHT) -> None:
        self.direction = direction
