from __future__ import annotations

import os
from dataclasses import dataclass

from core.errors import ConfigurationError
from domain.entities.host_address import DEFAULT_SCHEME, DEFAULT_STATUS_PATH


@dataclass(frozen=True, slots=True)
class PollerConfig:
    """Knobs consumed by the fetch-and-aggregate pipeline.

    Out-of-range values raise ``ConfigurationError`` on construction.
    """
    fetch_timeout_s: float = 10.0
    request_delay_ms: int = 200
    max_concurrency: int = 5
    max_requests_per_second: int = 0
    batch_timeout_s: float = 0.0
    status_path: str = DEFAULT_STATUS_PATH
    scheme: str = DEFAULT_SCHEME

    def __post_init__(self) -> None:
        if self.fetch_timeout_s <= 0:
            raise ConfigurationError(f"fetch timeout must be positive, got {self.fetch_timeout_s}")
        if self.request_delay_ms < 0:
            raise ConfigurationError(f"request delay must be non-negative, got {self.request_delay_ms}")
        if self.max_concurrency < 1:
            raise ConfigurationError(f"max concurrency must be >= 1, got {self.max_concurrency}")
        if self.max_requests_per_second < 0:
            raise ConfigurationError(f"max requests per second must be >= 0, got {self.max_requests_per_second}")
        if self.batch_timeout_s < 0:
            raise ConfigurationError(f"batch timeout must be >= 0, got {self.batch_timeout_s}")
        if self.scheme not in ("http", "https"):
            raise ConfigurationError(f"scheme must be http or https, got {self.scheme!r}")

    @property
    def request_delay_s(self) -> float:
        return self.request_delay_ms / 1000.0

    @classmethod
    def from_env(cls) -> "PollerConfig":
        """Build PollerConfig from environment variables.

        Unparseable numbers fall back to their defaults; parsed values are
        still range-checked.
        """
        def _int(name: str, default: int) -> int:
            try:
                return int(os.getenv(name, str(default)))
            except ValueError:
                return default

        return cls(
            fetch_timeout_s=float(_int("HTTP_TIMEOUT", 10)),
            request_delay_ms=_int("REQUEST_DELAY", 200),
            max_concurrency=_int("MAX_CONCURRENCY", 5),
            max_requests_per_second=_int("MAX_REQUESTS_PER_SECOND", 0),
            batch_timeout_s=float(_int("BATCH_TIMEOUT", 0)),
            status_path=os.getenv("STATUS_PATH", DEFAULT_STATUS_PATH),
            scheme=os.getenv("DEFAULT_SCHEME", DEFAULT_SCHEME),
        )
