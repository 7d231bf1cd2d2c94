"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from web_snake.config import GameConfig
from web_snake.scheduler import TickScheduler
from web_snake.server.routes import router
from web_snake.server.session import GameSession
from web_snake.server.websocket import ws_router


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config if config is not None else GameConfig()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        session = GameSession.from_config(config)
        app.state.session = session
        async with TickScheduler(session.tick, period_ms=config.tick_rate_ms):
            yield
        await session.close()

    app = FastAPI(title="Web Snake API", version="0.1.0", lifespan=_lifespan)
    app.include_router(router)
    app.include_router(ws_router)
    return app
