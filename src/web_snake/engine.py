"""Tick-based game engine composing grid, snake, food, and score logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from web_snake.controls import InputController
from web_snake.food import FoodSpawner
from web_snake.grid import Grid
from web_snake.score import ScoreTracker
from web_snake.snake import Coordinate, Direction, Snake

logger = logging.getLogger(__name__)

ORIGIN = Coordinate(0, 0)
# Placeholder food shown before the first game starts.
_IDLE_FOOD = Coordinate(5, 5)


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class TickOutcome(str, enum.Enum):
    """Result of advancing the game by one tick."""

    MOVED = "moved"
    GREW = "grew"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """The mutable-per-tick part of a game: snake, food, and score."""

    snake: Snake
    food: Coordinate
    score: int = 0


class GameEngine:
    """Single-player, tick-based snake engine.

    The engine owns the board, food spawner, score tracker, and input
    controller. :meth:`tick` is the pure state transition; :meth:`step`
    applies it to the engine's own state while a game is running.
    """

    def __init__(
        self,
        scores: ScoreTracker | None = None,
        spawner: FoodSpawner | None = None,
        seed: int | None = None,
    ) -> None:
        self.grid = Grid()
        self.scores = scores if scores is not None else ScoreTracker()
        self.spawner = spawner if spawner is not None else FoodSpawner(
            self.grid.width, self.grid.height, rng=np.random.default_rng(seed),
        )
        self.input = InputController()
        self.state = GameState(snake=Snake.at(*ORIGIN), food=_IDLE_FOOD)
        self.status = GameStatus.NOT_STARTED
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self.status == GameStatus.RUNNING

    @property
    def direction(self) -> Direction:
        """The direction the next tick will move in."""
        return self.input.direction

    def start(self) -> GameState:
        """(Re)initialize a game and mark it running."""
        self.input.reset(Direction.RIGHT)
        self.scores.reset()
        self.state = GameState(
            snake=Snake.at(*ORIGIN), food=self.spawner.spawn(), score=0,
        )
        self.status = GameStatus.RUNNING
        self.ticks = 0
        logger.info("Game started; food at (%d, %d).", *self.state.food)
        return self.state

    def tick(
        self, state: GameState, direction: Direction,
    ) -> tuple[GameState, TickOutcome]:
        """Advance *state* by one step in *direction*.

        Returns the new state and the outcome. On game over the input state
        is returned unchanged.
        """
        new_head = state.snake.next_head(direction)

        # --- collision checks against the pre-move body ---
        if not self.grid.in_bounds(new_head):
            return state, TickOutcome.GAME_OVER
        if state.snake.occupies(new_head):
            return state, TickOutcome.GAME_OVER

        # --- food ---
        if new_head == state.food:
            score = state.score + 1
            self.scores.record(score)
            grown = GameState(
                snake=state.snake.advance(direction, grow=True),
                food=self.spawner.spawn(),
                score=score,
            )
            return grown, TickOutcome.GREW

        moved = GameState(
            snake=state.snake.advance(direction),
            food=state.food,
            score=state.score,
        )
        return moved, TickOutcome.MOVED

    def step(self) -> TickOutcome | None:
        """Run one tick of the current game.

        Returns ``None`` without touching any state unless the game is
        running.
        """
        if not self.running:
            return None

        self.state, outcome = self.tick(self.state, self.input.direction)
        self.ticks += 1
        if outcome == TickOutcome.GAME_OVER:
            self.status = GameStatus.GAME_OVER
            logger.info(
                "Game over at tick %d with score %d.",
                self.ticks, self.state.score,
            )
        return outcome

    def handle_key(self, key: str) -> bool:
        """Dispatch a key-down event.

        After a game over any key restarts the game. While running, the key
        is fed to the input controller. Returns True if the key had an
        effect.
        """
        if self.status == GameStatus.GAME_OVER:
            self.start()
            return True
        if self.status == GameStatus.RUNNING:
            return self.input.press(key)
        return False

    def snapshot(self) -> dict:
        """Return the serializable state a renderer draws from."""
        return {
            **self.grid.to_dict(),
            "snake": self.state.snake.to_dict()["body"],
            "direction": int(self.input.direction),
            "food": list(self.state.food),
            "score": self.state.score,
            "high_score": self.scores.high_score,
            "running": self.running,
            "status": self.status.value,
            "tick": self.ticks,
        }
