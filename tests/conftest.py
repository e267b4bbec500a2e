import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from suffix_classifier import rules
from suffix_classifier.engine import HostClassifier
from suffix_classifier.rules import RuleDatabase

SAMPLE_RULES = """\
// Miniature copy of the public suffix list used by the tests.
// See https://publicsuffix.org/list/ for the real thing.

// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// au : https://en.wikipedia.org/wiki/.au
au
com.au
net.au

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk

// jp : https://en.wikipedia.org/wiki/.jp
jp
*.kawasaki.jp
!city.kawasaki.jp

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

// Google, Inc.
blogspot.com
blogspot.co.uk

// GitHub, Inc.
github.io

// Amazon
*.compute.amazonaws.com

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    monkeypatch.delenv("SUFFIX_LIST_PATH", raising=False)
    monkeypatch.delenv("SUFFIX_LOG_LEVEL", raising=False)
    rules.reset_default()
    yield
    rules.reset_default()


@pytest.fixture()
def sample_rules() -> str:
    return SAMPLE_RULES


@pytest.fixture()
def database(sample_rules: str) -> RuleDatabase:
    return RuleDatabase.build(sample_rules)


@pytest.fixture()
def classifier(database: RuleDatabase) -> HostClassifier:
    return HostClassifier(database)


@pytest.fixture()
def rules_file(tmp_path: Path, sample_rules: str) -> Path:
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(sample_rules, encoding="utf-8")
    return path
