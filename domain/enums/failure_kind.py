"""Failure classification for a single host fetch."""
from enum import Enum


class FailureKind(Enum):
    """Why a host produced no status record.

    TIMEOUT and TRANSPORT cover the network round trip, HTTP_STATUS a response
    other than 200, DECODE a body that is not a valid status document.
    CANCELLED is only produced when the whole batch is cancelled.
    """

    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Human-readable name used in reports."""
        labels = {
            "timeout": "timed out",
            "transport": "unreachable",
            "http_status": "bad status",
            "decode": "bad payload",
            "cancelled": "cancelled",
        }
        return labels[self.value]
