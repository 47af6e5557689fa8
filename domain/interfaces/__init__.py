"""Domain interfaces."""
from .host_list import IHostListRepository
from .status_fetcher import IStatusFetcher

__all__ = [
    'IHostListRepository',
    'IStatusFetcher',
]
