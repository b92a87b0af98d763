"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Set


@dataclass(slots=True)
class PageData:
    """Holds the URL and decoded HTML of a fetched page."""

    url: str
    content: str


class Observation(NamedTuple):
    """A (host, label) pair seen on a crawled page."""

    host: str
    label: str


@dataclass(slots=True)
class ExtractionResult:
    """Internal links to crawl next plus every observation made on one page."""

    internal_links: Set[str] = field(default_factory=set)
    observations: List[Observation] = field(default_factory=list)
