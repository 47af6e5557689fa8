from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from core.errors import FleetHealthError
from core.logging.logger import StructuredLogger, get_logger
from application import PollFleetUseCase, PollerConfig
from domain.entities import FleetReport
from domain.interfaces import IStatusFetcher
from infrastructure import FileHostListRepository, HttpStatusFetcher
from presentation.report_renderer import render_json, render_text, write_json_report

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_HOSTS_FAILED = 2


@dataclass
class ReportOptions:
    hosts_file: Path
    report_file: Optional[Path]
    json_out: bool = False
    strict: bool = False


class ReportCommand:
    """Polls the fleet once, prints the report and saves it as JSON."""

    def __init__(
        self,
        config: PollerConfig,
        options: ReportOptions,
        *,
        fetcher_factory: Optional[Callable[[PollerConfig], IStatusFetcher]] = None,
        out: Callable[[str], None] = print,
    ) -> None:
        self.config = config
        self.options = options
        self.fetcher_factory = fetcher_factory or (lambda cfg: HttpStatusFetcher(timeout_s=cfg.fetch_timeout_s))
        self.out = out
        self.logger: StructuredLogger = get_logger(__name__, service="report")

    def _print_configuration(self) -> None:
        self.out("Running with configuration:")
        self.out(f"- HTTP Timeout: {self.config.fetch_timeout_s:g}s")
        self.out(f"- Request Delay: {self.config.request_delay_ms}ms")
        self.out(f"- Max Concurrency: {self.config.max_concurrency}")
        if self.config.max_requests_per_second:
            self.out(f"- Max Requests/s: {self.config.max_requests_per_second}")
        if self.config.batch_timeout_s:
            self.out(f"- Batch Timeout: {self.config.batch_timeout_s:g}s")
        self.out("")

    async def _poll(self) -> FleetReport:
        hosts = FileHostListRepository(self.options.hosts_file)
        async with self.fetcher_factory(self.config) as fetcher:
            return await PollFleetUseCase(fetcher, self.config, hosts).execute()

    async def run(self) -> int:
        if not self.options.json_out:
            self._print_configuration()
        try:
            report = await self._poll()
        except FleetHealthError as e:
            self.logger.critical(lambda: f"run aborted: {e}")
            self.out(f"Error: {e}")
            return EXIT_FATAL

        if self.options.json_out:
            self.out(render_json(report))
        else:
            for line in render_text(report):
                self.out(line)

        if self.options.report_file:
            try:
                path = write_json_report(report, self.options.report_file)
            except OSError as e:
                self.logger.error(lambda: f"cannot write report: {e}", extra={"error": str(e)})
                self.out(f"Error writing to file: {e}")
                return EXIT_FATAL
            self.logger.info(lambda: f"report saved to {path}")
            if not self.options.json_out:
                self.out(f"Report saved to {path}")

        if self.options.strict and report.failures:
            return EXIT_HOSTS_FAILED
        return EXIT_OK
