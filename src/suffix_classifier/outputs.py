"""The five per-host results as a closed set of output kinds."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Union

from .engine import HostClassifier
from .normalization import normalize_host

OutputValue = Union[bool, str]


class OutputKind(Enum):
    IS_ICANN = "is_icann"
    PUBLIC_SUFFIX = "public_suffix"
    DOMAIN_SUFFIX = "domain_suffix"
    REGISTERED_DOMAIN = "registered_domain"
    PUBLIC_REGISTERED_DOMAIN = "public_registered_domain"


@dataclass(frozen=True)
class HostClassification:
    """All suffix results for one host."""

    host: str
    is_icann: bool
    public_suffix: str
    domain_suffix: str
    registered_domain: str
    public_registered_domain: str

    def get(self, kind: OutputKind) -> OutputValue:
        return getattr(self, kind.value)

    def as_dict(self) -> Dict[str, OutputValue]:
        return asdict(self)


def resolve(classifier: HostClassifier, kind: OutputKind, host: str) -> OutputValue:
    if kind is OutputKind.IS_ICANN:
        return classifier.is_icann(host)
    if kind is OutputKind.PUBLIC_SUFFIX:
        return classifier.public_suffix(host)
    if kind is OutputKind.DOMAIN_SUFFIX:
        return classifier.domain_suffix(host)
    if kind is OutputKind.REGISTERED_DOMAIN:
        return classifier.registered_domain(host)
    if kind is OutputKind.PUBLIC_REGISTERED_DOMAIN:
        return classifier.public_registered_domain(host)
    raise ValueError(f"unsupported output kind: {kind!r}")


def classify_host(classifier: HostClassifier, host: str) -> HostClassification:
    return HostClassification(
        host=normalize_host(host),
        is_icann=classifier.is_icann(host),
        public_suffix=classifier.public_suffix(host),
        domain_suffix=classifier.domain_suffix(host),
        registered_domain=classifier.registered_domain(host),
        public_registered_domain=classifier.public_registered_domain(host),
    )
