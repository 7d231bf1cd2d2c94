"""Periodic tick scheduling on the asyncio event loop."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

TICK_RATE_MS = 100

TickCallback = Callable[[], Awaitable[None] | None]


class TickScheduler:
    """Calls *callback* once per period until stopped.

    Use ``async with`` to bind the timer to a scope; leaving the scope
    cancels the loop and waits for it, so no tick fires afterwards.
    """

    def __init__(self, callback: TickCallback, period_ms: int = TICK_RATE_MS) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive.")
        self.callback = callback
        self.period_ms = period_ms
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking. Must be called from a running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info("Tick scheduler started (period=%dms).", self.period_ms)

    async def stop(self) -> None:
        """Cancel the tick loop and wait for it to exit."""
        task = self._task
        self._task = None
        if task is None:
            return
        if not task.done():
            task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Tick scheduler stopped.")

    async def _loop(self) -> None:
        interval = self.period_ms / 1000.0
        try:
            while True:
                await asyncio.sleep(interval)
                result = self.callback()
                if inspect.isawaitable(result):
                    await result
        except Exception:
            logger.exception("Tick callback failed; scheduler halted.")

    async def __aenter__(self) -> TickScheduler:
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()
