"""Registered-domain decomposition: a suffix plus exactly one more label."""
from __future__ import annotations

from .classifier import is_icann, public_suffix
from .models import Domain
from .rules import RuleDatabase


def suffix_plus_one(domain: str, suffix: str) -> str:
    """Return ``suffix`` with the next label to its left from ``domain`` prepended.

    Returns an empty string when there is no label left of the suffix or when
    ``suffix`` does not end ``domain`` on a label boundary.
    """
    if not suffix or len(suffix) >= len(domain):
        return ""
    i = len(domain) - len(suffix) - 1
    if domain[i] != "." or not domain.endswith(suffix):
        return ""
    return domain[domain.rfind(".", 0, i) + 1:]


def registered_domain(database: RuleDatabase, domain: Domain) -> str:
    """eTLD+1 where the eTLD is the ICANN-delegated public suffix."""
    return suffix_plus_one(domain.name, public_suffix(database, domain))


def public_registered_domain(database: RuleDatabase, domain: Domain) -> str:
    # Gated on the authority of the unpeeled domain's own match.
    if not is_icann(database, domain):
        return ""
    return registered_domain(database, domain)
