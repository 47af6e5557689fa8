"""Domain entities."""
from .aggregate_totals import AggregateTotals, AggregationKey
from .fetch_outcome import FetchOutcome
from .fleet_report import FleetReport, GroupedTotals
from .host_address import HostAddress, normalize_host, normalize_hosts
from .status_record import StatusRecord

__all__ = [
    'AggregateTotals',
    'AggregationKey',
    'FetchOutcome',
    'FleetReport',
    'GroupedTotals',
    'HostAddress',
    'normalize_host',
    'normalize_hosts',
    'StatusRecord',
]
