"""Domain layer - Entities, enums, and interfaces."""
from .entities import (
    AggregateTotals,
    AggregationKey,
    FetchOutcome,
    FleetReport,
    HostAddress,
    StatusRecord,
    normalize_host,
)
from .enums import FailureKind
from .interfaces import IHostListRepository, IStatusFetcher

__all__ = [
    # Entities
    'AggregateTotals',
    'AggregationKey',
    'FetchOutcome',
    'FleetReport',
    'HostAddress',
    'StatusRecord',
    'normalize_host',
    # Enums
    'FailureKind',
    # Interfaces
    'IHostListRepository',
    'IStatusFetcher',
]
