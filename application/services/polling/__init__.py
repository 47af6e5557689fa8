from .poller_config import PollerConfig
from .dispatcher import FetchDispatcher
from .aggregator import Aggregator, aggregate

__all__ = [
    "PollerConfig",
    "FetchDispatcher",
    "Aggregator",
    "aggregate",
]
