"""Tests for GameSession broadcasting and shutdown."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketState

from web_snake.config import GameConfig
from web_snake.engine import GameState, TickOutcome
from web_snake.server.app import create_app
from web_snake.server.session import GameSession
from web_snake.snake import Coordinate, Snake


class FakeSocket:
    """Stands in for a renderer WebSocket."""

    def __init__(self, fail_send: bool = False) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.fail_send = fail_send
        self.sent: list[str] = []
        self.closed = False

    async def send_text(self, payload: str) -> None:
        if self.fail_send:
            raise RuntimeError("socket gone")
        self.sent.append(payload)

    async def close(self, code: int = 1000, reason: str = "") -> None:
        self.closed = True
        self.client_state = WebSocketState.DISCONNECTED


@pytest.fixture()
def session():
    return GameSession.from_config(GameConfig(seed=0))


class TestBroadcast:
    @pytest.mark.asyncio
    async def test_sends_snapshot_to_clients(self, session):
        ws = FakeSocket()
        session.clients.append(ws)
        await session.broadcast()
        assert len(ws.sent) == 1
        assert json.loads(ws.sent[0])["avatar"] == session.avatar

    @pytest.mark.asyncio
    async def test_drops_failing_socket(self, session):
        good, bad = FakeSocket(), FakeSocket(fail_send=True)
        session.clients.extend([good, bad])
        await session.broadcast()
        assert session.clients == [good]
        assert len(good.sent) == 1

    @pytest.mark.asyncio
    async def test_skips_disconnected_socket(self, session):
        ws = FakeSocket()
        ws.client_state = WebSocketState.DISCONNECTED
        session.clients.append(ws)
        await session.broadcast()
        assert ws.sent == []


class TestTick:
    @pytest.mark.asyncio
    async def test_tick_before_start_sends_nothing(self, session):
        ws = FakeSocket()
        session.clients.append(ws)
        assert await session.tick() is None
        assert ws.sent == []

    @pytest.mark.asyncio
    async def test_tick_broadcasts_frame(self, session):
        ws = FakeSocket()
        session.clients.append(ws)
        session.start()
        assert await session.tick() is not None
        assert json.loads(ws.sent[-1])["tick"] == 1

    @pytest.mark.asyncio
    async def test_tick_with_unwritable_store(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        session = GameSession.from_config(
            GameConfig(seed=0, high_score_path=str(blocker / "scores.json")),
        )
        session.start()
        engine = session.engine
        engine.state = GameState(snake=Snake.at(0, 0), food=Coordinate(1, 0))
        assert await session.tick() == TickOutcome.GREW
        assert engine.running


class TestClose:
    @pytest.mark.asyncio
    async def test_close_closes_sockets(self, session):
        sockets = [FakeSocket(), FakeSocket()]
        session.clients.extend(sockets)
        await session.close()
        assert all(ws.closed for ws in sockets)
        assert session.clients == []

    def test_lifespan_exit_closes_clients(self):
        app = create_app(GameConfig(seed=0))
        ws = FakeSocket()
        with TestClient(app):
            app.state.session.clients.append(ws)
        assert ws.closed
        assert app.state.session.clients == []
