"""Infrastructure API module."""
from .status_client import HttpStatusFetcher
from .concurrency_limiter import ConcurrencyLimiter
from .rate_limiter import RateLimiter

__all__ = [
    'HttpStatusFetcher',
    'ConcurrencyLimiter',
    'RateLimiter',
]
