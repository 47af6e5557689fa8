"""Status record returned by a host's health endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from core.errors import StatusDecodeError


# payload key -> attribute name
_COUNTER_FIELDS = {
    "uptime": "uptime_seconds",
    "requestCount": "request_count",
    "errorCount": "error_count",
    "successCount": "success_count",
}


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    if key not in payload:
        raise StatusDecodeError(f"missing field '{key}'")
    value = payload[key]
    if not isinstance(value, str):
        raise StatusDecodeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def _require_count(payload: Mapping[str, Any], key: str) -> int:
    if key not in payload:
        raise StatusDecodeError(f"missing field '{key}'")
    value = payload[key]
    # bool is an int subclass; a JSON true is not a counter.
    if isinstance(value, bool) or not isinstance(value, int):
        raise StatusDecodeError(f"field '{key}' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise StatusDecodeError(f"field '{key}' must be non-negative, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class StatusRecord:
    """One host's self-reported counters."""

    application: str
    version: str
    uptime_seconds: int
    request_count: int
    error_count: int
    success_count: int

    @classmethod
    def from_payload(cls, payload: Any) -> "StatusRecord":
        """Build a record from a decoded JSON document.

        Raises:
            StatusDecodeError: payload is not an object or a field is missing,
                of the wrong type, or negative.
        """
        if not isinstance(payload, Mapping):
            raise StatusDecodeError(f"expected a JSON object, got {type(payload).__name__}")
        counters = {attr: _require_count(payload, key) for key, attr in _COUNTER_FIELDS.items()}
        return cls(
            application=_require_str(payload, "application"),
            version=_require_str(payload, "version"),
            **counters,
        )

    def to_payload(self) -> dict:
        """Inverse of ``from_payload``; wire field names."""
        payload = {"application": self.application, "version": self.version}
        payload.update({key: getattr(self, attr) for key, attr in _COUNTER_FIELDS.items()})
        return payload
