from suffix_classifier.normalization import normalize_host, to_domain


def test_normalize_host_strips_port_and_case():
    assert normalize_host("Example.COM:8080") == "example.com"
    assert normalize_host("  example.com  ") == "example.com"
    assert normalize_host("example.com.") == "example.com"


def test_normalize_host_strips_any_port_token():
    assert normalize_host("example.com:http") == "example.com"
    assert normalize_host("example.com:") == "example.com"


def test_normalize_host_bracketed_ipv6():
    assert normalize_host("[::1]:443") == "::1"
    assert normalize_host("[2001:DB8::1]:") == "2001:db8::1"
    # brackets without a port do not split
    assert normalize_host("[2001:DB8::1]") == "[2001:db8::1]"
    assert normalize_host("[::1]:1:2") == "[::1]:1:2"


def test_normalize_host_keeps_unsplittable_token():
    assert normalize_host("a:b:c") == "a:b:c"
    assert normalize_host("example.com") == "example.com"


def test_normalize_host_empty_values():
    assert normalize_host(None) == ""
    assert normalize_host("") == ""
    assert normalize_host(":8080") == ""


def test_to_domain_splits_labels():
    assert to_domain("Sub.Example.com:80").labels == ("sub", "example", "com")
    assert not to_domain("a..b")
    assert not to_domain("")
