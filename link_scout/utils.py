# File: link_scout/utils.py
"""link_scout.utils: URL helpers shared by the extractor, the scheduler and the engine."""

from __future__ import annotations

import re
from typing import Sequence
from urllib.parse import urldefrag, urlparse, urlunparse

from yarl import URL

from link_scout.errors import SeedParseError

__all__: Sequence[str] = (
    "HTTP_SCHEMES",
    "normalize_url",
    "canonical_url",
    "extract_host",
    "parse_seed",
)

HTTP_SCHEMES = ("http", "https")

# registered names (already IDNA-encoded by yarl) or IP literals without brackets
_HOST_RE = re.compile(r"[A-Za-z0-9._-]+|[0-9A-Fa-f:.]+")


def normalize_url(url: str) -> str:
    """Lowercase scheme and netloc, drop the fragment, turn an empty path into ``/``.

    The query string is kept verbatim.
    """
    url, _ = urldefrag(url)
    parsed = urlparse(url)
    path = parsed.path or "/"
    return urlunparse(
        (parsed.scheme.lower(), parsed.netloc.lower(), path, parsed.params, parsed.query, "")
    )


def canonical_url(url: str) -> str:
    """Percent-encode *url* with yarl and normalize it.

    ``/a b`` and ``/a%20b`` come out identical. Raises ValueError unless the
    result is an absolute http(s) URL with a well-formed host.
    """
    urlparse(url).port  # raises on a malformed authority
    parsed = URL(url)
    if parsed.scheme.lower() not in HTTP_SCHEMES or not parsed.raw_host:
        raise ValueError("not an absolute http(s) URL")
    if not _HOST_RE.fullmatch(parsed.raw_host):
        raise ValueError(f"invalid host {parsed.raw_host!r}")
    return normalize_url(str(parsed.with_fragment(None)))


def extract_host(url: str) -> str:
    """Return the lower-cased hostname of *url* (no port), or ``""`` if there is none."""
    return urlparse(url).hostname or ""


def parse_seed(seed_url: str) -> str:
    """Validate the seed URL and return its host, the base domain of the run."""
    if not isinstance(seed_url, str) or not seed_url.strip():
        raise SeedParseError(str(seed_url), "empty URL")
    try:
        return extract_host(canonical_url(seed_url))
    except ValueError as exc:
        raise SeedParseError(seed_url, str(exc)) from exc
