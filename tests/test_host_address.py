"""Tests for host normalization."""

import pytest

from domain.entities import normalize_host, normalize_hosts


class TestNormalizeHost:
    def test_bare_host_gets_scheme_and_path(self) -> None:
        assert normalize_host("server-0001.example.org") == "https://server-0001.example.org/healthz"

    @pytest.mark.parametrize(
        "host",
        ["http://server-1.example.org", "https://server-1.example.org", "HTTP://server-1.example.org"],
    )
    def test_existing_scheme_is_kept(self, host: str) -> None:
        assert normalize_host(host) == f"{host}/healthz"

    def test_does_not_duplicate_scheme(self) -> None:
        url = normalize_host("https://server-1.example.org")
        assert url.count("://") == 1

    @pytest.mark.parametrize(
        "host",
        ["server-1", "http://127.0.0.1:8080", "https://server-1/healthz", "server-1/", ""],
    )
    def test_idempotent(self, host: str) -> None:
        once = normalize_host(host)
        assert normalize_host(once) == once

    def test_path_appended_once(self) -> None:
        assert normalize_host("server-1/healthz") == "https://server-1/healthz"
        assert normalize_host("server-1/") == "https://server-1/healthz"

    def test_custom_scheme_and_path(self) -> None:
        assert normalize_host("server-1", scheme="http", status_path="status") == "http://server-1/status"

    def test_normalize_hosts_leaves_input_untouched(self) -> None:
        hosts = ["a", "a", "http://b"]
        result = normalize_hosts(hosts)
        assert hosts == ["a", "a", "http://b"]
        assert result == ["https://a/healthz", "https://a/healthz", "http://b/healthz"]
