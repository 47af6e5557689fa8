"""Use case: poll every host once and aggregate the answers."""
from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import Optional, Sequence

from core.logging.context import log_context
from domain.entities import FleetReport, HostAddress
from domain.interfaces import IHostListRepository, IStatusFetcher
from application.services.polling import Aggregator, FetchDispatcher, PollerConfig

logger = logging.getLogger(__name__)


class PollFleetUseCase:
    """
    host list -> FetchDispatcher -> Aggregator -> FleetReport.

    The host list comes either from the caller or from the repository. A
    repository failure raises ``HostListError`` before any request is sent.
    """

    def __init__(
        self,
        fetcher: IStatusFetcher,
        config: PollerConfig,
        host_repository: Optional[IHostListRepository] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ):
        self.fetcher         = fetcher
        self.config          = config
        self.host_repository = host_repository
        self.cancel_event    = cancel_event

    def _load_hosts(self) -> list:
        if self.host_repository is None:
            raise ValueError("no hosts given and no host repository configured")
        return self.host_repository.load()

    async def execute(self, hosts: Optional[Sequence[HostAddress]] = None) -> FleetReport:
        targets = list(hosts) if hosts is not None else self._load_hosts()
        batch_id = uuid.uuid4().hex[:12]

        with log_context(batch_id=batch_id):
            logger.info(
                f"batch-start hosts={len(targets)} concurrency={self.config.max_concurrency} "
                f"delay={self.config.request_delay_ms}ms timeout={self.config.fetch_timeout_s}s",
            )
            started = time.perf_counter()
            dispatcher = FetchDispatcher(self.fetcher, self.config, cancel_event=self.cancel_event)
            aggregator = await Aggregator().consume(dispatcher.run(targets))
            elapsed = time.perf_counter() - started

            report = FleetReport(
                totals=aggregator.totals(),
                failures=list(aggregator.failures),
                hosts_polled=aggregator.outcomes_seen,
                cancelled=dispatcher.cancelled,
            )
            if dispatcher.cancelled:
                logger.warning(f"batch-cancelled after {elapsed:.2f}s")
            if report.failures:
                logger.warning(
                    f"{report.hosts_failed}/{report.hosts_polled} hosts failed and are excluded from the totals",
                    extra={"failed": report.hosts_failed, "hosts": report.hosts_polled},
                )
            logger.info(
                f"batch-complete in {elapsed:.2f}s: {report.hosts_succeeded} ok, "
                f"{report.hosts_failed} failed, {len(aggregator.keys())} application versions",
            )
        return report
