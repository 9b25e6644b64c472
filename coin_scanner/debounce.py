"""Debounce gate for rapid-fire search input."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Delay a coroutine call until input has been idle for ``delay`` seconds.

    Each ``submit`` cancels the pending dispatch, so only the most recent
    value in an idle window reaches the callback. A dispatch whose delay
    has already elapsed is running and is not cancelled by later input.
    """

    def __init__(self, callback: Callable[[str], Awaitable[Any]], delay: float = 0.5) -> None:
        self.callback = callback
        self.delay = delay
        self._pending: Optional[asyncio.Task] = None
        self._latest: Optional[asyncio.Task] = None

    def submit(self, value: str) -> None:
        if self._pending is not None:
            self._pending.cancel()
            logger.debug("Superseded pending dispatch")
        task = asyncio.get_running_loop().create_task(self._dispatch_later(value))
        self._pending = task
        self._latest = task

    async def _dispatch_later(self, value: str) -> None:
        await asyncio.sleep(self.delay)
        if self._pending is asyncio.current_task():
            self._pending = None
        await self.callback(value)

    @property
    def pending(self) -> bool:
        return self._pending is not None

    async def wait(self) -> None:
        """Wait for the most recently submitted dispatch to finish."""
        task = self._latest
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled():
            task.result()

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
