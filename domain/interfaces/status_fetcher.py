"""Port for fetching one host's status."""
from abc import ABC, abstractmethod

from ..entities import FetchOutcome


class IStatusFetcher(ABC):
    """Performs one status request against an already-normalized URL."""

    @abstractmethod
    async def fetch(self, host: str, timeout_s: float) -> FetchOutcome:
        """Fetch and decode ``host``'s status.

        Every transport, status and decode problem is reported as a failed
        outcome; implementations must not raise for them.
        """
        pass

    async def __aenter__(self) -> "IStatusFetcher":
        return self

    async def __aexit__(self, *_) -> None:
        return None
