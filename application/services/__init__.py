"""Application services root exports."""
from .polling import Aggregator, FetchDispatcher, PollerConfig, aggregate

__all__ = [
    "Aggregator",
    "FetchDispatcher",
    "PollerConfig",
    "aggregate",
]
