"""Infrastructure layer - HTTP client, limiters, and repositories."""
from .api import HttpStatusFetcher, ConcurrencyLimiter, RateLimiter
from .repositories import FileHostListRepository

__all__ = [
    'HttpStatusFetcher',
    'ConcurrencyLimiter',
    'RateLimiter',
    'FileHostListRepository',
]
