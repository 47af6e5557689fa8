"""Application use cases."""
from .poll_fleet import PollFleetUseCase

__all__ = [
    'PollFleetUseCase',
]
