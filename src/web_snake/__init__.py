"""Web Snake — single-player snake game core."""

from web_snake.controls import InputController, key_to_direction
from web_snake.engine import GameEngine, GameState, GameStatus, TickOutcome
from web_snake.food import FoodSpawner
from web_snake.grid import BOARD_SIZE, CellType, Grid
from web_snake.scheduler import TickScheduler
from web_snake.score import JsonFileStore, MemoryStore, ScoreTracker
from web_snake.snake import Coordinate, Direction, Snake

__all__ = [
    "BOARD_SIZE",
    "CellType",
    "Coordinate",
    "Direction",
    "FoodSpawner",
    "GameEngine",
    "GameState",
    "GameStatus",
    "Grid",
    "InputController",
    "JsonFileStore",
    "MemoryStore",
    "ScoreTracker",
    "Snake",
    "TickOutcome",
    "TickScheduler",
    "key_to_direction",
]
