"""WebSocket handler streaming frames to a renderer and taking key events."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from web_snake.server.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


@ws_router.websocket("/game/play")
async def play(websocket: WebSocket) -> None:
    """Renderer WebSocket: send keys, receive a snapshot each tick."""
    session = _get_session(websocket)
    await websocket.accept()
    session.clients.append(websocket)
    logger.info("Renderer connected (%d total).", len(session.clients))

    try:
        # Send an initial snapshot so the client can draw immediately.
        await websocket.send_text(
            json.dumps(session.snapshot(), separators=(",", ":")),
        )

        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("action") == "start":
                session.start()
                await session.broadcast()
                continue

            key = msg.get("key")
            if not isinstance(key, str):
                continue
            was_running = session.engine.running
            if session.handle_key(key) and not was_running:
                await session.broadcast()
    except WebSocketDisconnect:
        logger.info("Renderer disconnected.")
    finally:
        if websocket in session.clients:
            session.clients.remove(websocket)
