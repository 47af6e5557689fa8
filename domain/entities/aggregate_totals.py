"""Per application/version accumulator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class AggregationKey(NamedTuple):
    application: str
    version: str


@dataclass(slots=True)
class AggregateTotals:
    """Running request and success sums for one (application, version).

    Python integers do not overflow, so the sums stay exact however many
    64-bit counters are folded in.
    """

    application: str
    version: str
    total_requests: int = 0
    total_successes: int = 0

    @property
    def key(self) -> AggregationKey:
        return AggregationKey(self.application, self.version)

    def add(self, requests: int, successes: int) -> None:
        self.total_requests += requests
        self.total_successes += successes

    def to_dict(self) -> dict:
        return {
            'application': self.application,
            'version': self.version,
            'totalRequests': self.total_requests,
            'totalSuccesses': self.total_successes,
        }
