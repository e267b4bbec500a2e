"""Host-level facade tying normalization, lookup and decomposition together."""
from __future__ import annotations

from . import classifier, decompose
from .normalization import to_domain
from .rules import RuleDatabase


class HostClassifier:
    """Answer suffix questions about raw host strings against one rule database.

    Instances hold no per-call state, so a single instance can serve any number
    of threads. Hosts may carry a ``:port`` and any letter case.
    """

    def __init__(self, database: RuleDatabase) -> None:
        self.database = database

    def is_icann(self, host: str) -> bool:
        return classifier.is_icann(self.database, to_domain(host))

    def domain_suffix(self, host: str) -> str:
        return classifier.domain_suffix(self.database, to_domain(host))

    def public_suffix(self, host: str) -> str:
        return classifier.public_suffix(self.database, to_domain(host))

    def registered_domain(self, host: str) -> str:
        return decompose.registered_domain(self.database, to_domain(host))

    def public_registered_domain(self, host: str) -> str:
        return decompose.public_registered_domain(self.database, to_domain(host))
