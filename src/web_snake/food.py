"""Food spawning logic."""

from __future__ import annotations

import logging

import numpy as np

from web_snake.grid import BOARD_SIZE
from web_snake.snake import Coordinate

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Draws food coordinates uniformly over the whole board.

    Occupied cells are not excluded, so food may land under the snake.
    Pass a seeded NumPy RNG for deterministic placement.
    """

    def __init__(
        self,
        width: int = BOARD_SIZE,
        height: int = BOARD_SIZE,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> Coordinate:
        """Return a random coordinate with x and y drawn independently."""
        x = int(self.rng.integers(0, self.width))
        y = int(self.rng.integers(0, self.height))
        logger.debug("Food spawned at (%d, %d).", x, y)
        return Coordinate(x, y)
