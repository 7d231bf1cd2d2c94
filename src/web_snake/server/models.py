"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from web_snake.engine import GameStatus


class Snapshot(BaseModel):
    """Everything a renderer needs to draw one frame."""

    width: int
    height: int
    snake: list[tuple[int, int]]
    direction: int = Field(ge=0, le=3)
    food: tuple[int, int]
    score: int = Field(ge=0)
    high_score: int = Field(ge=0)
    running: bool
    status: GameStatus
    tick: int
    avatar: str


class KeyEvent(BaseModel):
    """Request body for POST /game/keys."""

    key: str = Field(min_length=1, max_length=32)


class KeyResponse(BaseModel):
    """Whether a key changed anything, plus the resulting snapshot."""

    accepted: bool
    snapshot: Snapshot


class AvatarRequest(BaseModel):
    """Request body for PUT /game/avatar."""

    avatar: str = Field(min_length=1, max_length=8)


class Board(BaseModel):
    """Painted board cells, indexed [y][x]."""

    width: int
    height: int
    cells: list[list[int]]
