"""
Exception hierarchy for LinkScout.

Only :class:`SeedParseError` is fatal for a run; the other kinds are contained
where they happen and merely logged.
"""
from __future__ import annotations

__all__ = (
    "LinkScoutError",
    "SeedParseError",
    "InvalidSeedError",
    "FetchError",
    "LinkParseError",
    "ShutdownTimeoutWarning",
)


class LinkScoutError(Exception):
    """Base class for all LinkScout errors."""


class SeedParseError(LinkScoutError, ValueError):
    """The seed URL is not an absolute http(s) URL with a host."""

    def __init__(self, seed: str, reason: str = "not an absolute http(s) URL") -> None:
        super().__init__(f"Invalid seed URL {seed!r}: {reason}")
        self.seed = seed
        self.reason = reason


InvalidSeedError = SeedParseError


class FetchError(LinkScoutError):
    """A single page could not be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class LinkParseError(LinkScoutError, ValueError):
    """An href could not be resolved to a crawlable absolute URL."""

    def __init__(self, href: str, reason: str) -> None:
        super().__init__(f"{href!r}: {reason}")
        self.href = href
        self.reason = reason


class ShutdownTimeoutWarning(RuntimeWarning):
    """The worker pool did not drain within the shutdown bounds."""
