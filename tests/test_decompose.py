from suffix_classifier.decompose import public_registered_domain, registered_domain, suffix_plus_one
from suffix_classifier.models import Domain


def test_suffix_plus_one_adds_next_label():
    assert suffix_plus_one("sub.example.com", "com") == "example.com"
    assert suffix_plus_one("example.com", "com") == "example.com"
    assert suffix_plus_one("a.b.c.co.uk", "co.uk") == "c.co.uk"


def test_suffix_plus_one_without_room():
    assert suffix_plus_one("com", "com") == ""
    assert suffix_plus_one("com", "example.com") == ""
    assert suffix_plus_one("", "") == ""


def test_suffix_plus_one_rejects_inconsistent_inputs():
    # suffix not aligned on a label boundary
    assert suffix_plus_one("example.com", "xcom") == ""
    assert suffix_plus_one("notcom.org", "com") == ""
    assert suffix_plus_one("foo.org", "net") == ""
    assert suffix_plus_one("example.com", "") == ""


def test_registered_domain_uses_public_suffix(database):
    assert registered_domain(database, Domain.from_name("foo.blogspot.com")) == "blogspot.com"
    assert registered_domain(database, Domain.from_name("x.y.bar.com.au")) == "bar.com.au"


def test_public_registered_domain_gated_on_unpeeled_match(database):
    assert public_registered_domain(database, Domain.from_name("foo.blogspot.com")) == ""
    assert public_registered_domain(database, Domain.from_name("blogspot.com")) == ""
    assert public_registered_domain(database, Domain.from_name("x.example.com")) == "example.com"
