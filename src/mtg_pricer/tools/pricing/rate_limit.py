"""Request throttling for external price lookups."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Protocol


class RateLimiter(Protocol):
    """Something that can hold a caller back until a request is allowed."""

    async def acquire(self) -> None: ...


class IntervalRateLimiter:
    """Allows one request per interval, with a burst of one.

    The first `acquire()` returns immediately; each later one waits until
    `interval_ms` has passed since the previous permitted request started.
    """

    def __init__(
        self,
        interval_ms: int,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval = interval_ms / 1000
        self._clock = clock
        self._sleep = sleep
        self._last_start: float | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Wait until the next request is permitted, then claim it."""
        async with self._lock:
            if self._last_start is not None:
                wait = self._last_start + self.interval - self._clock()
                if wait > 0:
                    await self._sleep(wait)
            self._last_start = self._clock()


class NoopRateLimiter:
    """Never waits."""

    async def acquire(self) -> None:
        return None
