"""Application layer - Services and use cases."""
from .services import Aggregator, FetchDispatcher, PollerConfig
from .use_cases import PollFleetUseCase

__all__ = [
    'Aggregator',
    'FetchDispatcher',
    'PollerConfig',
    'PollFleetUseCase',
]
