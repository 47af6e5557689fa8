"""Bounded-concurrency fan-out of status fetches."""
from __future__ import annotations

import asyncio
from typing import AsyncIterator, Awaitable, List, Optional, Sequence, Tuple, TypeVar

from core.errors import DispatcherError
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import FetchOutcome, HostAddress, normalize_host
from domain.enums import FailureKind
from domain.interfaces import IStatusFetcher
from infrastructure.api import ConcurrencyLimiter, RateLimiter
from .poller_config import PollerConfig

T = TypeVar("T")


class FetchDispatcher:
    """
    Runs one fetch task per host and streams their outcomes.

    Each task normalizes its host, takes a limiter permit, sleeps the pacing
    delay, passes the optional global rate limiter, fetches, and releases the
    permit. Every task emits exactly one outcome, success or failure, into a
    queue sized to the batch; the stream ends once all tasks have joined.

    A dispatcher runs a single batch. ``cancel_event`` (or the configured
    batch timeout) turns every fetch not yet finished into a CANCELLED
    outcome; it is checked at each suspension point of a task.
    """

    def __init__(
        self,
        fetcher: IStatusFetcher,
        config: PollerConfig,
        *,
        limiter: Optional[ConcurrencyLimiter] = None,
        rate_limiter: Optional[RateLimiter] = None,
        cancel_event: Optional[asyncio.Event] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.fetcher = fetcher
        self.config = config
        self.limiter = limiter or ConcurrencyLimiter(config.max_concurrency)
        if rate_limiter is None and config.max_requests_per_second > 0:
            rate_limiter = RateLimiter.per_second(config.max_requests_per_second)
        self.rate_limiter = rate_limiter
        self.cancel_event = cancel_event or asyncio.Event()
        self.logger = logger or get_logger(__name__, service="dispatcher")
        self.batch_complete = asyncio.Event()
        self._started = False
        self._timed_out = False

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    @property
    def timed_out(self) -> bool:
        return self._timed_out

    def run(self, hosts: Sequence[HostAddress]) -> AsyncIterator[FetchOutcome]:
        """Start the batch and return its outcome stream.

        Outcomes arrive in completion order, one per input host (duplicates
        included). Raises ``DispatcherError`` if this dispatcher already ran.
        """
        if self._started:
            raise DispatcherError("dispatcher already ran a batch; create a new one")
        self._started = True
        return self._stream(list(hosts))

    async def _stream(self, hosts: List[HostAddress]) -> AsyncIterator[FetchOutcome]:
        if not hosts:
            self.batch_complete.set()
            return

        results: asyncio.Queue[FetchOutcome] = asyncio.Queue(maxsize=len(hosts))
        watchdog = self._arm_batch_timeout()
        tasks = [asyncio.create_task(self._fetch_one(host, results)) for host in hosts]
        try:
            for _ in range(len(tasks)):
                yield await results.get()
            await asyncio.gather(*tasks)
            self.batch_complete.set()
        finally:
            if watchdog is not None:
                watchdog.cancel()
            pending = [t for t in tasks if not t.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

    def _arm_batch_timeout(self) -> Optional[asyncio.TimerHandle]:
        if self.config.batch_timeout_s <= 0:
            return None
        loop = asyncio.get_running_loop()
        return loop.call_later(self.config.batch_timeout_s, self._expire)

    def _expire(self) -> None:
        if self.cancel_event.is_set():
            return
        self._timed_out = True
        self.logger.warning(
            lambda: f"batch-timeout after {self.config.batch_timeout_s}s, cancelling remaining fetches",
        )
        self.cancel_event.set()

    async def _fetch_one(self, host: HostAddress, results: "asyncio.Queue[FetchOutcome]") -> None:
        url = normalize_host(host, scheme=self.config.scheme, status_path=self.config.status_path)
        try:
            outcome = await self._guarded_fetch(url)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.logger.error(lambda: "fetch-crashed", extra={"host": url, "error": repr(e)}, exc_info=True)
            outcome = FetchOutcome.failed(url, FailureKind.TRANSPORT, f"unexpected error: {e!r}")
        self._log_outcome(outcome)
        results.put_nowait(outcome)

    async def _guarded_fetch(self, url: str) -> FetchOutcome:
        if self.cancelled:
            return self._cancelled(url, "before admission")
        async with self.limiter:
            if self.cancelled:
                return self._cancelled(url, "after admission")
            if self.config.request_delay_ms > 0:
                finished, _ = await self._unless_cancelled(asyncio.sleep(self.config.request_delay_s))
                if not finished:
                    return self._cancelled(url, "during pacing delay")
            if self.rate_limiter is not None:
                finished, _ = await self._unless_cancelled(self.rate_limiter.acquire())
                if not finished:
                    return self._cancelled(url, "waiting for rate limiter")
            finished, outcome = await self._unless_cancelled(
                self.fetcher.fetch(url, self.config.fetch_timeout_s)
            )
            if not finished:
                return self._cancelled(url, "during request")
            return outcome

    async def _unless_cancelled(self, aw: Awaitable[T]) -> Tuple[bool, Optional[T]]:
        """Await ``aw`` unless the batch is cancelled first.

        Returns ``(True, result)`` when ``aw`` finished, ``(False, None)`` when
        the cancel event won; ``aw`` is then cancelled.
        """
        work = asyncio.ensure_future(aw)
        stop = asyncio.ensure_future(self.cancel_event.wait())
        try:
            await asyncio.wait({work, stop}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            stop.cancel()
            if not work.done():
                work.cancel()
                await asyncio.gather(work, return_exceptions=True)
        if work.cancelled():
            return False, None
        return True, work.result()

    def _cancelled(self, url: str, stage: str) -> FetchOutcome:
        reason = "batch timeout" if self._timed_out else "batch cancelled"
        return FetchOutcome.failed(url, FailureKind.CANCELLED, f"{reason} {stage}")

    def _log_outcome(self, outcome: FetchOutcome) -> None:
        if outcome.ok:
            record = outcome.record
            self.logger.success(
                lambda: f"fetch-ok {record.application} {record.version}",
                extra={"host": outcome.host, "latency_ms": outcome.latency_ms},
            )
        elif outcome.failure is FailureKind.CANCELLED:
            self.logger.debug(lambda: "fetch-cancelled", extra={"host": outcome.host, "error": outcome.error})
        else:
            self.logger.error(
                lambda: f"Error fetching data from {outcome.host}: {outcome.error}",
                extra={
                    "host": outcome.host,
                    "kind": outcome.failure.value,
                    "status": outcome.status_code,
                    "latency_ms": outcome.latency_ms,
                },
            )
