# File: tests/test_utils.py
import pytest
from link_scout.errors import InvalidSeedError, SeedParseError
from link_scout.utils import canonical_url, extract_host, normalize_url, parse_seed


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://example.com", "https://example.com/"),
        ("HTTPS://Example.COM/Path", "https://example.com/Path"),
        ("https://example.com/a#section", "https://example.com/a"),
        ("https://example.com/s?q=1&b=2", "https://example.com/s?q=1&b=2"),
    ],
)
def test_normalize_url(url, expected):
    assert normalize_url(url) == expected


def test_extract_host_drops_port_and_case():
    assert extract_host("http://Example.com:8080/x") == "example.com"
    assert extract_host("/relative/path") == ""


def test_parse_seed_returns_base_domain():
    assert parse_seed("https://ecosio.com") == "ecosio.com"
    assert parse_seed("http://localhost:8000/start") == "localhost"


def test_parse_seed_error_carries_seed():
    with pytest.raises(InvalidSeedError) as info:
        parse_seed("javascript:alert(1)")
    assert info.value.seed == "javascript:alert(1)"
    assert isinstance(info.value, ValueError)


def test_parse_seed_bad_port():
    with pytest.raises(SeedParseError):
        parse_seed("http://example.com:http/")


@pytest.mark.parametrize(
    "raw,encoded",
    [
        ("https://example.com/a b", "https://example.com/a%20b"),
        ("https://example.com/a%20b", "https://example.com/a%20b"),
        ("https://Example.com#top", "https://example.com/"),
    ],
)
def test_canonical_url(raw, encoded):
    assert canonical_url(raw) == encoded


@pytest.mark.parametrize("url", ["http://exa mple.com/", "mailto:me@example.com", "/relative", "http://[::1"])
def test_canonical_url_rejects(url):
    with pytest.raises(ValueError):
        canonical_url(url)


def test_parse_seed_rejects_invalid_host():
    with pytest.raises(SeedParseError):
        parse_seed("https://exa mple.com/")
