"""Normalization helpers for raw host tokens."""
from __future__ import annotations

from .models import Domain


def normalize_host(value: str | None) -> str:
    """Strip an optional ``:port`` and lower-case a raw host token.

    Ports are split the way ``host:port`` authorities are: any token after a
    single colon, or after the closing bracket of an IPv6 literal, is the port.
    A token that does not split is kept as-is rather than rejected.
    """
    if not value:
        return ""
    host = value.strip()
    if host.startswith("["):
        end = host.find("]")
        rest = host[end + 1:] if end != -1 else ""
        if rest.startswith(":") and ":" not in rest[1:]:
            host = host[1:end]
    elif host.count(":") == 1:
        host = host.partition(":")[0]
    return host.strip(".").lower()


def to_domain(value: str | None) -> Domain:
    """Normalize a raw host token and split it into labels."""
    return Domain.from_name(normalize_host(value))
