"""HTTP client for host status endpoints."""
from __future__ import annotations

import time
from typing import Dict, Optional

import httpx

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import FetchOutcome, StatusRecord
from domain.enums import FailureKind
from domain.interfaces import IStatusFetcher

_BODY_SNIPPET = 200


def _snippet(text: str) -> str:
    text = text.strip()
    if len(text) > _BODY_SNIPPET:
        return text[:_BODY_SNIPPET] + "..."
    return text


class HttpStatusFetcher(IStatusFetcher):
    """Fetches ``/healthz``-style documents with httpx.

    Used as an async context manager, one ``httpx.AsyncClient`` (and its
    connection pool) is shared by every fetch of the batch. Outside a context
    each call opens and closes its own client.
    """

    def __init__(
        self,
        *,
        timeout_s: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.timeout_s = timeout_s
        self.headers = {"Accept": "application/json", **(headers or {})}
        self.transport = transport
        self.logger = logger or get_logger(__name__, service="fetcher")
        self.session: Optional[httpx.AsyncClient] = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_s,
            headers=self.headers,
            transport=self.transport,
            follow_redirects=False,
        )

    async def __aenter__(self) -> "HttpStatusFetcher":
        self.session = self._new_client()
        return self

    async def __aexit__(self, *_) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    async def fetch(self, host: str, timeout_s: Optional[float] = None) -> FetchOutcome:
        timeout = self.timeout_s if timeout_s is None else timeout_s
        if self.session is not None:
            return await self._fetch_with(self.session, host, timeout)
        async with self._new_client() as client:
            return await self._fetch_with(client, host, timeout)

    async def _fetch_with(self, client: httpx.AsyncClient, url: str, timeout: float) -> FetchOutcome:
        start = time.perf_counter()

        def elapsed() -> int:
            return int((time.perf_counter() - start) * 1000.0)

        self.logger.debug(lambda: "fetch-start", extra={"host": url})
        try:
            resp = await client.get(url, timeout=timeout)
        except httpx.TimeoutException as e:
            return FetchOutcome.failed(
                url, FailureKind.TIMEOUT, f"failed to reach server {url}: timed out after {timeout}s ({type(e).__name__})",
                latency_ms=elapsed(),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return FetchOutcome.failed(
                url, FailureKind.TRANSPORT, f"failed to reach server {url}: {str(e) or type(e).__name__}",
                latency_ms=elapsed(),
            )

        if resp.status_code != httpx.codes.OK:
            return FetchOutcome.failed(
                url,
                FailureKind.HTTP_STATUS,
                f"server {url} returned status {resp.status_code}: {_snippet(resp.text)}",
                status_code=resp.status_code,
                latency_ms=elapsed(),
            )

        try:
            record = StatusRecord.from_payload(resp.json())
        except ValueError as e:
            # json errors and StatusDecodeError are both ValueErrors
            return FetchOutcome.failed(
                url,
                FailureKind.DECODE,
                f"failed to decode JSON from server {url}: {e}. Response: {_snippet(resp.text)}",
                status_code=resp.status_code,
                latency_ms=elapsed(),
            )
        return FetchOutcome.succeeded(url, record, latency_ms=elapsed())
