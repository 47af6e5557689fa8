"""Global request-rate limiter."""
import asyncio
import time
from collections import deque
from typing import Deque, Tuple
import logging

from core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Sliding-window limiter shared by every fetch task of a batch.

    The per-task pacing delay throttles each task individually, so the
    fleet-wide request rate still grows with the concurrency cap. This
    limiter puts a hard ceiling on requests started per window regardless
    of how many tasks hold a permit.
    """

    def __init__(self, max_requests: int, window_s: float = 1.0):
        if max_requests < 1:
            raise ConfigurationError(f"max_requests must be >= 1, got {max_requests}")
        if window_s <= 0:
            raise ConfigurationError(f"window_s must be > 0, got {window_s}")
        self.max_requests = max_requests
        self.window_s = window_s

        self._times: Deque[float] = deque()
        self._lock = asyncio.Lock()

    @classmethod
    def per_second(cls, requests: int) -> "RateLimiter":
        return cls(requests, 1.0)

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = time.monotonic()

                while self._times and now - self._times[0] >= self.window_s:
                    self._times.popleft()

                if len(self._times) < self.max_requests:
                    self._times.append(now)
                    return

                wait = max(0.001, self.window_s - (now - self._times[0]))
                logger.debug(f"Rate limit, waiting {wait:.3f}s")
                await asyncio.sleep(wait)

    def get_status(self) -> Tuple[int, int]:
        now = time.monotonic()
        used = sum(1 for t in self._times if now - t < self.window_s)
        return used, self.max_requests

    async def reset(self) -> None:
        async with self._lock:
            self._times.clear()
