"""Coordinates, directions, and the snake body."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple


class Direction(enum.IntEnum):
    """Cardinal movement directions, encoded 0-3 clockwise from up."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Return the (dx, dy) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return Direction((self + 2) % 4)


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Coordinate(NamedTuple):
    """An (x, y) board position."""

    x: int
    y: int

    def step(self, direction: Direction) -> Coordinate:
        """Return the coordinate one unit away in *direction*."""
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Snake:
    """An immutable snake body ordered head-first.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    body: tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("Snake must have at least one segment.")

    @classmethod
    def at(cls, x: int, y: int) -> Snake:
        """Create a single-segment snake."""
        return cls((Coordinate(x, y),))

    @property
    def head(self) -> Coordinate:
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> Coordinate:
        """Compute the next head position without moving."""
        return self.head.step(direction)

    def occupies(self, coord: Coordinate) -> bool:
        """Check whether any segment sits on *coord*."""
        return coord in self.body

    def advance(self, direction: Direction, grow: bool = False) -> Snake:
        """Return the snake moved one step in *direction*.

        The tail is kept when *grow* is set, otherwise it is dropped.
        """
        body = (self.next_head(direction), *self.body)
        if not grow:
            body = body[:-1]
        return Snake(body)

    def to_dict(self) -> dict:
        """Serialize the body as a list of [x, y] pairs."""
        return {"body": [list(seg) for seg in self.body]}
