"""Public suffix classification toolkit."""

from .engine import HostClassifier
from .models import Authority, Domain, MatchResult, Rule, RuleKind
from .outputs import HostClassification, OutputKind, classify_host, resolve
from .rules import MalformedRuleFileError, RuleDatabase, RuleSourceNotFoundError

__all__ = [
    "HostClassifier",
    "Authority",
    "Domain",
    "MatchResult",
    "Rule",
    "RuleKind",
    "HostClassification",
    "OutputKind",
    "classify_host",
    "resolve",
    "MalformedRuleFileError",
    "RuleDatabase",
    "RuleSourceNotFoundError",
]
