"""Admission control for in-flight fetches."""
from __future__ import annotations

import asyncio

from core.errors import ConfigurationError


class ConcurrencyLimiter:
    """Counting permit pool of fixed capacity.

    ``in_flight`` and ``high_water`` are bookkeeping only; the semaphore does
    the admission. Knows nothing about hosts or results.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ConfigurationError(f"concurrency capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._sem = asyncio.BoundedSemaphore(capacity)
        self._in_flight = 0
        self._high_water = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def high_water(self) -> int:
        """Largest number of permits held at once so far."""
        return self._high_water

    def locked(self) -> bool:
        return self._sem.locked()

    async def acquire(self) -> None:
        await self._sem.acquire()
        self._in_flight += 1
        if self._in_flight > self._high_water:
            self._high_water = self._in_flight

    def release(self) -> None:
        if self._in_flight <= 0:
            raise RuntimeError("ConcurrencyLimiter released more times than acquired")
        self._in_flight -= 1
        self._sem.release()

    async def __aenter__(self) -> "ConcurrencyLimiter":
        await self.acquire()
        return self

    async def __aexit__(self, *_) -> None:
        self.release()
