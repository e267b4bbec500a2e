"""Data models for public suffix classification."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Authority(Enum):
    ICANN = "icann"
    PRIVATE = "private"


class RuleKind(Enum):
    EXACT = "exact"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class Rule:
    """One entry of the suffix list.

    ``labels`` are stored right-to-left, so ``co.uk`` becomes ``("uk", "co")``.
    Wildcard rules keep only their base labels (``*.ck`` -> ``("ck",)``).
    """

    labels: Tuple[str, ...]
    kind: RuleKind
    authority: Authority
    line_number: int = 0

    @property
    def depth(self) -> int:
        """Number of domain labels this rule spans when it matches."""
        if self.kind is RuleKind.WILDCARD:
            return len(self.labels) + 1
        return len(self.labels)

    @property
    def suffix_label_count(self) -> int:
        if self.kind is RuleKind.EXCEPTION:
            return len(self.labels) - 1
        return self.depth

    def text(self) -> str:
        name = ".".join(reversed(self.labels))
        if self.kind is RuleKind.WILDCARD:
            return f"*.{name}"
        if self.kind is RuleKind.EXCEPTION:
            return f"!{name}"
        return name


@dataclass(frozen=True)
class Domain:
    """A normalized hostname split into labels, left-to-right as written."""

    labels: Tuple[str, ...]

    @classmethod
    def from_name(cls, name: str) -> "Domain":
        if not name:
            return cls(())
        labels = tuple(name.split("."))
        if any(not label for label in labels):
            return cls(())
        return cls(labels)

    @property
    def name(self) -> str:
        return ".".join(self.labels)

    def tail(self, count: int) -> "Domain":
        if count <= 0:
            return Domain(())
        return Domain(self.labels[-count:])

    def __bool__(self) -> bool:
        return bool(self.labels)

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class MatchResult:
    suffix_label_count: int
    authority: Authority
