"""Host address normalization."""
from __future__ import annotations

from typing import Iterable, List

HostAddress = str

DEFAULT_SCHEME = "https"
DEFAULT_STATUS_PATH = "/healthz"
_SCHEMES = ("http://", "https://")


def normalize_host(
    host: HostAddress,
    *,
    scheme: str = DEFAULT_SCHEME,
    status_path: str = DEFAULT_STATUS_PATH,
) -> str:
    """Turn a host identifier into the URL of its status endpoint.

    A bare host gets ``scheme://`` prepended; a host that already carries
    ``http://`` or ``https://`` keeps it untouched. The status path is appended
    unless the address already ends with it, which makes the function
    idempotent.
    """
    if host.lower().startswith(_SCHEMES):
        prefix, rest = host.split("://", 1)
        prefix += "://"
    else:
        prefix, rest = f"{scheme}://", host
    path = "/" + status_path.lstrip("/")
    if rest.endswith(path):
        return prefix + rest
    return prefix + rest.rstrip("/") + path


def normalize_hosts(hosts: Iterable[HostAddress], **kwargs: str) -> List[str]:
    """Normalize every host, returning a new list (duplicates kept)."""
    return [normalize_host(h, **kwargs) for h in hosts]
