"""Fold fetch outcomes into per application/version totals."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import AsyncIterable, Dict, Iterable, List

from domain.entities import AggregateTotals, AggregationKey, FetchOutcome, GroupedTotals
from domain.enums import FailureKind

logger = logging.getLogger(__name__)


class Aggregator:
    """
    Sums ``request_count`` and ``success_count`` per (application, version).

    Order of outcomes does not matter. Failed outcomes add nothing to the
    totals but are kept in ``failures`` so callers can report them; a host
    that is down is otherwise invisible in the numbers.

    Owned by a single consumer; not safe to feed from several tasks.
    """

    def __init__(self) -> None:
        self._totals: Dict[str, Dict[str, AggregateTotals]] = {}
        self.failures: List[FetchOutcome] = []
        self.outcomes_seen = 0

    def add(self, outcome: FetchOutcome) -> None:
        self.outcomes_seen += 1
        if not outcome.ok:
            self.failures.append(outcome)
            return
        record = outcome.record
        versions = self._totals.setdefault(record.application, {})
        totals = versions.get(record.version)
        if totals is None:
            totals = AggregateTotals(application=record.application, version=record.version)
            versions[record.version] = totals
        totals.add(record.request_count, record.success_count)

    def extend(self, outcomes: Iterable[FetchOutcome]) -> "Aggregator":
        for outcome in outcomes:
            self.add(outcome)
        return self

    async def consume(self, outcomes: AsyncIterable[FetchOutcome]) -> "Aggregator":
        """Drain an outcome stream, folding as items arrive."""
        async for outcome in outcomes:
            self.add(outcome)
        return self

    def merge(self, other: "Aggregator") -> "Aggregator":
        """Add another aggregator's totals and failures into this one."""
        for versions in other._totals.values():
            for theirs in versions.values():
                ours = self._totals.setdefault(theirs.application, {}).get(theirs.version)
                if ours is None:
                    self._totals[theirs.application][theirs.version] = replace(theirs)
                else:
                    ours.add(theirs.total_requests, theirs.total_successes)
        self.failures.extend(other.failures)
        self.outcomes_seen += other.outcomes_seen
        return self

    def get(self, key: AggregationKey) -> AggregateTotals | None:
        return self._totals.get(key.application, {}).get(key.version)

    def keys(self) -> List[AggregationKey]:
        return [AggregationKey(app, ver) for app, versions in self._totals.items() for ver in versions]

    def failure_counts(self) -> Dict[FailureKind, int]:
        counts: Dict[FailureKind, int] = {}
        for outcome in self.failures:
            counts[outcome.failure] = counts.get(outcome.failure, 0) + 1
        return counts

    def totals(self) -> GroupedTotals:
        """Snapshot of the grouped totals; later ``add`` calls do not touch it."""
        return {
            app: {ver: replace(totals) for ver, totals in versions.items()}
            for app, versions in self._totals.items()
        }


def aggregate(outcomes: Iterable[FetchOutcome]) -> GroupedTotals:
    """Aggregate a finished sequence of outcomes."""
    aggregator = Aggregator().extend(outcomes)
    if aggregator.failures:
        logger.debug(f"Skipped {len(aggregator.failures)} failed outcomes during aggregation")
    return aggregator.totals()
