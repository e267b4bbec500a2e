"""Suffix classification over a rule database."""
from __future__ import annotations

from .models import Authority, Domain
from .rules import RuleDatabase


def is_icann(database: RuleDatabase, domain: Domain) -> bool:
    if not domain:
        return False
    return database.lookup(domain).authority is Authority.ICANN


def domain_suffix(database: RuleDatabase, domain: Domain) -> str:
    """Longest matching suffix, whichever authority manages it."""
    result = database.lookup(domain)
    return domain.tail(result.suffix_label_count).name


def public_suffix(database: RuleDatabase, domain: Domain) -> str:
    """Longest ICANN-delegated suffix.

    A private rule such as ``blogspot.com`` sits on top of an ICANN suffix.
    The matched private suffix itself is peeled one label at a time until a
    lookup lands on an ICANN rule, so labels left of the private suffix never
    take part in the search.
    """
    probe = domain
    while probe:
        result = database.lookup(probe)
        if result.authority is Authority.ICANN:
            return probe.tail(result.suffix_label_count).name
        matched = probe.tail(result.suffix_label_count)
        if len(matched) < 2:
            return ""
        probe = Domain(matched.labels[1:])
    return ""
