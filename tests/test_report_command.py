"""Tests for ReportCommand."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pytest

from application import PollerConfig
from domain.entities import FetchOutcome
from domain.enums import FailureKind
from presentation.cli import ReportCommand, ReportOptions
from presentation.cli.report_command import EXIT_FATAL, EXIT_HOSTS_FAILED, EXIT_OK

from .conftest import InstrumentedFetcher, make_record

CONFIG = PollerConfig(fetch_timeout_s=1.0, request_delay_ms=0, max_concurrency=2)


def respond(host: str) -> FetchOutcome:
    if "down" in host:
        return FetchOutcome.failed(host, FailureKind.TRANSPORT, "connection refused")
    return FetchOutcome.succeeded(host, make_record(requests=200, successes=150))


def command(tmp_path: Path, lines: List[str], **option_overrides) -> ReportCommand:
    hosts_file = tmp_path / "servers.txt"
    hosts_file.write_text("server-1\nserver-2\nserver-down\n", encoding="utf-8")
    options = ReportOptions(hosts_file=hosts_file, report_file=tmp_path / "report.json")
    for key, value in option_overrides.items():
        setattr(options, key, value)
    return ReportCommand(
        CONFIG,
        options,
        fetcher_factory=lambda cfg: InstrumentedFetcher(delay_s=0, responder=respond),
        out=lines.append,
    )


class TestReportCommand:
    @pytest.mark.asyncio
    async def test_prints_report_and_saves_json(self, tmp_path: Path) -> None:
        lines: List[str] = []

        code = await command(tmp_path, lines).run()

        assert code == EXIT_OK
        assert lines[0] == "Running with configuration:"
        assert "- Max Concurrency: 2" in lines
        assert "Application: Memcache2, Version: 1.0.1, Success Rate: 75.00%" in lines
        assert "Failed hosts (1):" in lines
        assert lines[-1] == f"Report saved to {tmp_path / 'report.json'}"
        saved = json.loads((tmp_path / "report.json").read_text(encoding="utf-8"))
        assert saved["Memcache2"]["1.0.1"]["totalRequests"] == 400

    @pytest.mark.asyncio
    async def test_json_output(self, tmp_path: Path) -> None:
        lines: List[str] = []

        code = await command(tmp_path, lines, json_out=True, report_file=None).run()

        assert code == EXIT_OK
        assert len(lines) == 1
        assert json.loads(lines[0])["Memcache2"]["1.0.1"]["totalSuccesses"] == 300
        assert not (tmp_path / "report.json").exists()

    @pytest.mark.asyncio
    async def test_strict_mode_flags_failed_hosts(self, tmp_path: Path) -> None:
        assert await command(tmp_path, [], strict=True).run() == EXIT_HOSTS_FAILED

    @pytest.mark.asyncio
    async def test_missing_host_list_is_fatal(self, tmp_path: Path) -> None:
        lines: List[str] = []

        code = await command(tmp_path, lines, hosts_file=tmp_path / "nope.txt").run()

        assert code == EXIT_FATAL
        assert lines[-1].startswith("Error: cannot read host list")
        assert not (tmp_path / "report.json").exists()
