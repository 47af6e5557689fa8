"""Tests for FetchOutcome."""

import pytest

from domain.entities import FetchOutcome
from domain.enums import FailureKind

from .conftest import make_record


class TestFetchOutcome:
    def test_success(self) -> None:
        outcome = FetchOutcome.succeeded("https://a/healthz", make_record(), latency_ms=12)
        assert outcome.ok
        assert outcome.failure is None
        assert outcome.status_code == 200
        assert "Memcache2 1.0.1" in outcome.describe()

    def test_failure(self) -> None:
        outcome = FetchOutcome.failed("https://a/healthz", FailureKind.DECODE, "bad json")
        assert not outcome.ok
        assert outcome.record is None
        assert outcome.describe() == "https://a/healthz: bad payload (bad json)"

    def test_needs_exactly_one_variant(self) -> None:
        with pytest.raises(ValueError):
            FetchOutcome(host="h")
        with pytest.raises(ValueError):
            FetchOutcome(host="h", record=make_record(), failure=FailureKind.TIMEOUT)
