"""End-to-end tests for PollFleetUseCase with a mocked HTTP transport."""

from __future__ import annotations

from pathlib import Path
from typing import List

import httpx
import pytest

from application import PollerConfig, PollFleetUseCase
from core.errors import HostListError
from domain.enums import FailureKind
from infrastructure import FileHostListRepository, HttpStatusFetcher

from .conftest import InstrumentedFetcher

CONFIG = PollerConfig(fetch_timeout_s=1.0, request_delay_ms=0, max_concurrency=2)


def fleet_transport(seen: List[str]) -> httpx.MockTransport:
    payloads = {
        "server-1": {"application": "Memcache2", "version": "1.0.1", "uptime": 10,
                     "requestCount": 5194800029, "errorCount": 1042813251, "successCount": 4151986778},
        "server-2": {"application": "Memcache2", "version": "1.0.1", "uptime": 10,
                     "requestCount": 1000000000, "errorCount": 200000000, "successCount": 800000000},
        "server-3": {"application": "Cache", "version": "2.0.0", "uptime": 10,
                     "requestCount": 0, "errorCount": 0, "successCount": 0},
    }

    def _handle(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        assert request.url.path == "/healthz"
        payload = payloads.get(request.url.host)
        if payload is None:
            return httpx.Response(500, text="boom")
        return httpx.Response(200, json=payload)

    return httpx.MockTransport(_handle)


class TestPollFleetUseCase:
    @pytest.mark.asyncio
    async def test_polls_and_aggregates(self) -> None:
        seen: List[str] = []
        hosts = ["server-1", "http://server-2", "server-3", "server-broken"]

        async with HttpStatusFetcher(transport=fleet_transport(seen)) as fetcher:
            report = await PollFleetUseCase(fetcher, CONFIG).execute(hosts)

        assert len(seen) == 4
        assert report.hosts_polled == 4
        assert report.hosts_failed == 1
        assert report.hosts_succeeded == 3
        memcache = report.totals["Memcache2"]["1.0.1"]
        assert memcache.total_requests == 6_194_800_029
        assert memcache.total_successes == 4_951_986_778
        assert report.totals["Cache"]["2.0.0"].total_requests == 0
        assert report.failures[0].failure is FailureKind.HTTP_STATUS
        assert report.failures[0].host == "https://server-broken/healthz"
        assert not report.cancelled

    @pytest.mark.asyncio
    async def test_reads_hosts_from_repository(self, tmp_path: Path) -> None:
        hosts_file = tmp_path / "servers.txt"
        hosts_file.write_text("server-1\nserver-1\n", encoding="utf-8")
        seen: List[str] = []

        async with HttpStatusFetcher(transport=fleet_transport(seen)) as fetcher:
            report = await PollFleetUseCase(fetcher, CONFIG, FileHostListRepository(hosts_file)).execute()

        assert seen == ["https://server-1/healthz", "https://server-1/healthz"]
        assert report.totals["Memcache2"]["1.0.1"].total_requests == 2 * 5_194_800_029

    @pytest.mark.asyncio
    async def test_host_list_error_stops_before_any_fetch(self, tmp_path: Path, fetcher: InstrumentedFetcher) -> None:
        use_case = PollFleetUseCase(fetcher, CONFIG, FileHostListRepository(tmp_path / "missing.txt"))

        with pytest.raises(HostListError):
            await use_case.execute()
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_empty_host_list(self, fetcher: InstrumentedFetcher) -> None:
        report = await PollFleetUseCase(fetcher, CONFIG).execute([])

        assert report.totals == {}
        assert report.failures == []
        assert report.hosts_polled == 0
        assert report.is_empty

    @pytest.mark.asyncio
    async def test_no_hosts_and_no_repository(self, fetcher: InstrumentedFetcher) -> None:
        with pytest.raises(ValueError):
            await PollFleetUseCase(fetcher, CONFIG).execute()
