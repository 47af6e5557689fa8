"""Result of polling one host."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..enums import FailureKind
from .status_record import StatusRecord


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    """Either a status record or a typed failure, never both.

    Use the ``succeeded`` / ``failed`` constructors; they keep exactly one
    variant populated.
    """

    host: str
    record: Optional[StatusRecord] = None
    failure: Optional[FailureKind] = None
    error: Optional[str] = None
    status_code: Optional[int] = None
    latency_ms: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.failure is None):
            raise ValueError("FetchOutcome needs exactly one of record or failure")

    @classmethod
    def succeeded(cls, host: str, record: StatusRecord, *, latency_ms: Optional[int] = None) -> "FetchOutcome":
        return cls(host=host, record=record, status_code=200, latency_ms=latency_ms)

    @classmethod
    def failed(
        cls,
        host: str,
        failure: FailureKind,
        error: str,
        *,
        status_code: Optional[int] = None,
        latency_ms: Optional[int] = None,
    ) -> "FetchOutcome":
        return cls(host=host, failure=failure, error=error, status_code=status_code, latency_ms=latency_ms)

    @property
    def ok(self) -> bool:
        return self.record is not None

    def describe(self) -> str:
        """One-line diagnostic for logs and reports."""
        if self.ok:
            return f"{self.host}: {self.record.application} {self.record.version}"
        return f"{self.host}: {self.failure.label} ({self.error})"
