"""Shared fixtures and fakes."""

from __future__ import annotations

import asyncio
from typing import Callable, Dict, List, Optional

import pytest

from domain.entities import FetchOutcome, StatusRecord
from domain.enums import FailureKind
from domain.interfaces import IStatusFetcher

MEMCACHE_PAYLOAD = {
    "application": "Memcache2",
    "version": "1.0.1",
    "uptime": 4637719417,
    "requestCount": 5194800029,
    "errorCount": 1042813251,
    "successCount": 4151986778,
}


def make_record(
    application: str = "Memcache2",
    version: str = "1.0.1",
    requests: int = 100,
    successes: int = 90,
) -> StatusRecord:
    return StatusRecord(
        application=application,
        version=version,
        uptime_seconds=1000,
        request_count=requests,
        error_count=requests - successes,
        success_count=successes,
    )


def ok(host: str = "https://h/healthz", **kwargs) -> FetchOutcome:
    return FetchOutcome.succeeded(host, make_record(**kwargs))


def failed(host: str = "https://down/healthz", kind: FailureKind = FailureKind.HTTP_STATUS) -> FetchOutcome:
    return FetchOutcome.failed(host, kind, "server returned status 500", status_code=500)


class InstrumentedFetcher(IStatusFetcher):
    """Fake fetcher that records calls and the peak number of concurrent fetches."""

    def __init__(
        self,
        *,
        delay_s: float = 0.01,
        responder: Optional[Callable[[str], FetchOutcome]] = None,
    ) -> None:
        self.delay_s = delay_s
        self.responder = responder or (lambda host: FetchOutcome.succeeded(host, make_record()))
        self.calls: List[str] = []
        self.timeouts: List[float] = []
        self.active = 0
        self.high_water = 0

    async def fetch(self, host: str, timeout_s: float) -> FetchOutcome:
        self.calls.append(host)
        self.timeouts.append(timeout_s)
        self.active += 1
        self.high_water = max(self.high_water, self.active)
        try:
            await asyncio.sleep(self.delay_s)
            return self.responder(host)
        finally:
            self.active -= 1


def by_host(outcomes: Dict[str, FetchOutcome]) -> Callable[[str], FetchOutcome]:
    def _respond(host: str) -> FetchOutcome:
        return outcomes[host]

    return _respond


@pytest.fixture
def fetcher() -> InstrumentedFetcher:
    return InstrumentedFetcher()


@pytest.fixture
def memcache_payload() -> dict:
    return dict(MEMCACHE_PAYLOAD)
