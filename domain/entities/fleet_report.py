"""Outcome of one batch."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from .aggregate_totals import AggregateTotals
from .fetch_outcome import FetchOutcome

GroupedTotals = Dict[str, Dict[str, AggregateTotals]]


@dataclass
class FleetReport:
    """Aggregated totals plus the hosts that contributed nothing to them."""

    totals: GroupedTotals = field(default_factory=dict)
    failures: List[FetchOutcome] = field(default_factory=list)
    hosts_polled: int = 0
    cancelled: bool = False

    @property
    def hosts_failed(self) -> int:
        return len(self.failures)

    @property
    def hosts_succeeded(self) -> int:
        return self.hosts_polled - self.hosts_failed

    @property
    def is_empty(self) -> bool:
        return not self.totals

    def iter_totals(self) -> Iterator[AggregateTotals]:
        """Totals sorted by application, then version."""
        for app in sorted(self.totals):
            versions = self.totals[app]
            for version in sorted(versions):
                yield versions[version]

    def to_dict(self) -> dict:
        """``{application: {version: {...}}}`` with wire field names."""
        return {
            app: {ver: totals.to_dict() for ver, totals in versions.items()}
            for app, versions in self.totals.items()
        }
