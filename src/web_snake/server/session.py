"""The single live game and the sockets watching it."""

from __future__ import annotations

import json
import logging

import numpy as np
from starlette.websockets import WebSocket, WebSocketState

from web_snake.config import DEFAULT_AVATAR, GameConfig
from web_snake.engine import GameEngine, TickOutcome
from web_snake.food import FoodSpawner
from web_snake.score import ScoreTracker

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the engine, the cosmetic avatar, and connected renderers.

    Key handling and ticks both run on the event loop and never await in
    the middle of a state change, so no locking is needed.
    """

    def __init__(self, engine: GameEngine, avatar: str = DEFAULT_AVATAR) -> None:
        self.engine = engine
        self.avatar = avatar
        self.clients: list[WebSocket] = []

    @classmethod
    def from_config(cls, config: GameConfig) -> GameSession:
        scores = ScoreTracker(config.build_store(), key=config.high_score_key)
        spawner = FoodSpawner(rng=np.random.default_rng(config.seed))
        return cls(GameEngine(scores=scores, spawner=spawner), avatar=config.avatar)

    def snapshot(self) -> dict:
        return {**self.engine.snapshot(), "avatar": self.avatar}

    def start(self) -> None:
        self.engine.start()

    def handle_key(self, key: str) -> bool:
        return self.engine.handle_key(key)

    async def tick(self) -> TickOutcome | None:
        """Advance the game and push the new frame if anything moved."""
        outcome = self.engine.step()
        if outcome is not None:
            await self.broadcast()
        return outcome

    async def broadcast(self) -> None:
        """Send the current snapshot to every connected renderer."""
        payload = json.dumps(self.snapshot(), separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a copy; disconnect handlers may mutate the list.
        for ws in list(self.clients):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in self.clients:
                self.clients.remove(ws)
        if dead:
            logger.info("Dropped %d dead renderer connection(s).", len(dead))

    async def close(self) -> None:
        """Close every connected renderer socket."""
        for ws in list(self.clients):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1001, reason="Server shutting down.")
            except Exception:
                logger.warning("Failed closing renderer socket.")
        self.clients.clear()
