"""HTTP and WebSocket surface for browser renderers."""

from web_snake.server.app import create_app
from web_snake.server.session import GameSession

__all__ = ["GameSession", "create_app"]
