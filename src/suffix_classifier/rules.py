"""Public suffix rule parsing and the indexed rule database."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Authority, Domain, MatchResult, Rule, RuleKind

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "public_suffix_list.dat"

_SECTION_RE = re.compile(r"^//\s*===(BEGIN|END) (ICANN|PRIVATE) DOMAINS===")
_PARTITION_ORDER = (Authority.ICANN, Authority.PRIVATE)
_DEFAULT_MATCH = MatchResult(suffix_label_count=1, authority=Authority.ICANN)
_EMPTY_MATCH = MatchResult(suffix_label_count=0, authority=Authority.ICANN)

_DEFAULT_DATABASE: "RuleDatabase | None" = None


class MalformedRuleFileError(ValueError):
    """Raised when a suffix list line cannot be parsed."""

    def __init__(self, message: str, line_number: int = 0, line: str = "") -> None:
        self.line_number = line_number
        self.line = line
        if line_number:
            message = f"line {line_number}: {message}: {line!r}"
        super().__init__(message)


class RuleSourceNotFoundError(FileNotFoundError):
    """Raised when no suffix list file can be located."""


_RuleKey = Tuple[RuleKind, Tuple[str, ...]]


class RuleDatabase:
    """Immutable, indexed collection of suffix rules supporting longest-match lookup.

    Rules are keyed per authority partition by their right-to-left label tuple,
    and the deepest rule ending in each top-level label bounds how many suffix
    lengths a lookup has to probe.
    """

    def __init__(self, rules: Iterable[Rule], source: Path | None = None) -> None:
        self.source = source
        partitions: Dict[Authority, Dict[_RuleKey, Rule]] = {
            authority: {} for authority in _PARTITION_ORDER
        }
        max_depth: Dict[str, int] = {}
        for rule in rules:
            partition = partitions[rule.authority]
            key = (rule.kind, rule.labels)
            if key in partition:
                logger.debug(
                    "Skipping duplicate rule %s on line %s", rule.text(), rule.line_number
                )
                continue
            partition[key] = rule
            top = rule.labels[0]
            if rule.depth > max_depth.get(top, 0):
                max_depth[top] = rule.depth
        self._partitions = partitions
        self._max_depth = max_depth
        self._max_rule_depth = max(max_depth.values(), default=0)

    @classmethod
    def build(cls, text: str) -> "RuleDatabase":
        return cls.from_lines(text.splitlines())

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Path | None = None) -> "RuleDatabase":
        database = cls(parse_rules(lines), source=source)
        logger.info(
            "Loaded suffix rules: %d icann, %d private",
            database.count(Authority.ICANN),
            database.count(Authority.PRIVATE),
        )
        return database

    @classmethod
    def from_path(cls, path: Path) -> "RuleDatabase":
        source = Path(path).resolve()
        try:
            with source.open(encoding="utf-8") as handle:
                return cls.from_lines(handle, source=source)
        except FileNotFoundError:
            raise RuleSourceNotFoundError(f"suffix list not found: {path}") from None

    @property
    def max_rule_depth(self) -> int:
        return self._max_rule_depth

    def count(self, authority: Authority | None = None) -> int:
        if authority is None:
            return sum(len(partition) for partition in self._partitions.values())
        return len(self._partitions[authority])

    def __len__(self) -> int:
        return self.count()

    def rules(self) -> List[Rule]:
        return [
            rule
            for authority in _PARTITION_ORDER
            for rule in self._partitions[authority].values()
        ]

    def lookup(self, domain: Domain) -> MatchResult:
        """Return the matched suffix length and authority for ``domain``.

        An empty domain yields a zero-length match. A domain that no rule covers
        falls back to the implicit ``*`` rule: one label, ICANN-delegated.
        """
        if not domain:
            return _EMPTY_MATCH
        rule = self.lookup_rule(domain)
        if rule is None:
            return _DEFAULT_MATCH
        return MatchResult(suffix_label_count=rule.suffix_label_count, authority=rule.authority)

    def lookup_rule(self, domain: Domain) -> Optional[Rule]:
        """Return the prevailing rule for ``domain`` or None if nothing matches."""
        labels = domain.labels
        if not labels:
            return None
        depth = min(len(labels), self._max_depth.get(labels[-1], 0))
        reversed_labels = tuple(reversed(labels))

        # Exception rules win over any other match, however deep.
        for size in range(depth, 1, -1):
            rule = self._find(RuleKind.EXCEPTION, reversed_labels[:size])
            if rule is not None:
                return rule

        for size in range(depth, 0, -1):
            rule = self._find(RuleKind.EXACT, reversed_labels[:size])
            if rule is None and size > 1:
                rule = self._find(RuleKind.WILDCARD, reversed_labels[: size - 1])
            if rule is not None:
                return rule
        return None

    def _find(self, kind: RuleKind, labels: Tuple[str, ...]) -> Optional[Rule]:
        for authority in _PARTITION_ORDER:
            rule = self._partitions[authority].get((kind, labels))
            if rule is not None:
                return rule
        return None


def parse_rules(lines: Iterable[str]) -> List[Rule]:
    """Parse suffix list text into rules, tracking the ICANN/PRIVATE sections."""
    rules: List[Rule] = []
    section: Authority | None = None
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("//"):
            section = _apply_section_marker(line, section, line_number)
            continue
        token = line.split()[0]
        authority = section or Authority.ICANN
        rules.append(parse_rule(token, authority, line_number=line_number))
    if section is not None:
        logger.warning("Suffix list ended inside the %s section", section.name)
    return rules


def parse_rule(token: str, authority: Authority, line_number: int = 0) -> Rule:
    """Parse a single rule token such as ``co.uk``, ``*.ck`` or ``!www.ck``."""
    text = token.lower()
    kind = RuleKind.EXACT
    if text.startswith("!"):
        kind = RuleKind.EXCEPTION
        text = text[1:]
    elif text.startswith("*."):
        kind = RuleKind.WILDCARD
        text = text[2:]

    labels = text.split(".")
    if not text or any(not label for label in labels):
        raise MalformedRuleFileError("empty label in rule", line_number, token)
    if any("*" in label or "!" in label for label in labels):
        raise MalformedRuleFileError("misplaced wildcard or exception marker", line_number, token)
    if kind is RuleKind.EXCEPTION and len(labels) < 2:
        raise MalformedRuleFileError("exception rule needs at least two labels", line_number, token)

    return Rule(
        labels=tuple(reversed(labels)),
        kind=kind,
        authority=authority,
        line_number=line_number,
    )


def _apply_section_marker(
    line: str, section: Authority | None, line_number: int
) -> Authority | None:
    match = _SECTION_RE.match(line)
    if not match:
        return section
    action, name = match.groups()
    authority = Authority[name]
    if action == "BEGIN":
        if section is not None:
            raise MalformedRuleFileError(
                f"{name} section opened inside {section.name} section", line_number, line
            )
        return authority
    if section is not authority:
        raise MalformedRuleFileError(f"unbalanced end of {name} section", line_number, line)
    return None


def default_rule_paths(base_dir: Path | None = None) -> List[Path]:
    roots: List[Path] = []
    if base_dir:
        roots.append(base_dir)
    roots.extend([Path.cwd(), Path(__file__).resolve().parents[2]])

    candidates: List[Path] = []
    for root in roots:
        for path in (root / DEFAULT_FILENAME, root / "data" / DEFAULT_FILENAME):
            if path.exists() and path not in candidates:
                candidates.append(path)
    return candidates


def load_default(path: Path | None = None, base_dir: Path | None = None) -> RuleDatabase:
    """Return the process-wide database, building it on first use.

    An explicit ``path`` that differs from the cached database's source builds
    and publishes a replacement.
    """
    cached = _DEFAULT_DATABASE
    if cached is not None and (path is None or cached.source == Path(path).resolve()):
        return cached
    if path is None:
        paths = default_rule_paths(base_dir)
        if not paths:
            raise RuleSourceNotFoundError(
                f"no {DEFAULT_FILENAME} found; set SUFFIX_LIST_PATH or pass --rules"
            )
        path = paths[0]
    return publish_default(RuleDatabase.from_path(path))


def publish_default(database: RuleDatabase) -> RuleDatabase:
    """Replace the process-wide database with a fully built instance."""
    global _DEFAULT_DATABASE
    _DEFAULT_DATABASE = database
    return database


def get_default() -> RuleDatabase:
    if _DEFAULT_DATABASE is None:
        raise LookupError("no suffix rule database has been loaded")
    return _DEFAULT_DATABASE


def reset_default() -> None:
    global _DEFAULT_DATABASE
    _DEFAULT_DATABASE = None


__all__ = [
    "RuleDatabase",
    "MalformedRuleFileError",
    "RuleSourceNotFoundError",
    "parse_rules",
    "parse_rule",
    "load_default",
    "publish_default",
    "get_default",
    "reset_default",
]
