"""Board bounds and cell painting for the snake game."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from web_snake.snake import Coordinate, Snake

BOARD_SIZE = 20


class CellType(enum.IntEnum):
    """Integer codes stored in a painted board."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Fixed 20×20 board.

    The grid holds no game content; it bounds coordinates and can paint a
    snake and food into a NumPy array for renderers. Painted arrays are
    indexed ``[y, x]``.
    """

    def __init__(self, width: int = BOARD_SIZE, height: int = BOARD_SIZE) -> None:
        if width != BOARD_SIZE or height != BOARD_SIZE:
            raise ValueError(f"Board must be {BOARD_SIZE}×{BOARD_SIZE}.")
        self.width = width
        self.height = height

    def in_bounds(self, coord: Coordinate) -> bool:
        """Check whether a coordinate lies within the board."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def paint(self, snake: Snake, food: Coordinate) -> np.ndarray:
        """Return the board as an int8 array of :class:`CellType` codes.

        Snake segments are painted after the food, so food under the body is
        hidden.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        if self.in_bounds(food):
            cells[food.y, food.x] = CellType.FOOD
        for seg in snake.body:
            if self.in_bounds(seg):
                cells[seg.y, seg.x] = CellType.SNAKE
        if self.in_bounds(snake.head):
            cells[snake.head.y, snake.head.x] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        """Serialize board bounds to a dictionary."""
        return {"width": self.width, "height": self.height}
