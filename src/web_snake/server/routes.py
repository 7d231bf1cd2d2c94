"""REST API route handlers for the game."""

from __future__ import annotations

from fastapi import APIRouter, Request

from web_snake.server.models import (
    AvatarRequest,
    Board,
    KeyEvent,
    KeyResponse,
    Snapshot,
)
from web_snake.server.session import GameSession

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


@router.get("")
async def get_game(request: Request) -> Snapshot:
    """Return the current snapshot."""
    return Snapshot(**_get_session(request).snapshot())


@router.get("/board")
async def get_board(request: Request) -> Board:
    """Return the board painted as cell codes."""
    engine = _get_session(request).engine
    cells = engine.grid.paint(engine.state.snake, engine.state.food)
    return Board(
        width=engine.grid.width,
        height=engine.grid.height,
        cells=cells.tolist(),
    )


@router.post("/start")
async def start_game(request: Request) -> Snapshot:
    """Start a new game, replacing any current one."""
    session = _get_session(request)
    session.start()
    await session.broadcast()
    return Snapshot(**session.snapshot())


@router.post("/keys")
async def press_key(body: KeyEvent, request: Request) -> KeyResponse:
    """Deliver a key-down event."""
    session = _get_session(request)
    was_running = session.engine.running
    accepted = session.handle_key(body.key)
    if accepted and not was_running:
        await session.broadcast()
    return KeyResponse(accepted=accepted, snapshot=Snapshot(**session.snapshot()))


@router.put("/avatar")
async def set_avatar(body: AvatarRequest, request: Request) -> Snapshot:
    """Change the cosmetic avatar symbol."""
    session = _get_session(request)
    session.avatar = body.avatar
    return Snapshot(**session.snapshot())
