# link_scout/crawler/link_extractor.py
"""
Link extraction for LinkScout: turns a page into internal links and
(host, label) observations.
"""
from __future__ import annotations

import asyncio
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.models import ExtractionResult, Observation, PageData
from link_scout.errors import FetchError, LinkParseError
from link_scout.logger import logger
from link_scout.utils import canonical_url, extract_host

__all__ = ("LinkExtractor", "parse_links", "resolve_link")


def resolve_link(page_url: str, href: str) -> str:
    """
    Resolve *href* against *page_url* and canonicalise the result.

    Raises LinkParseError unless the result is an absolute http(s) URL
    with a valid host (mailto:, javascript:, tel: and malformed targets fail here).
    """
    try:
        return canonical_url(urljoin(page_url, href))
    except ValueError as exc:
        raise LinkParseError(href, str(exc)) from exc


def parse_links(page: PageData, base_domain: str) -> ExtractionResult:
    """
    Scan *page* for ``<a href>`` anchors.

    Every resolvable link yields an observation; links on *base_domain*
    are also returned as internal links.
    """
    result = ExtractionResult()
    soup = BeautifulSoup(page.content, "html.parser")
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        try:
            link = resolve_link(page.url, href.strip())
        except LinkParseError as exc:
            logger.debug("Skipping link on %s: %s", page.url, exc)
            continue
        host = extract_host(link)
        if host == base_domain:
            result.internal_links.add(link)
        result.observations.append(Observation(host, tag.get_text().strip()))
    return result


class LinkExtractor:
    """Fetches a page and parses its links relative to the run's base domain."""

    def __init__(self, fetcher: Fetcher, base_domain: str) -> None:
        self.fetcher = fetcher
        self.base_domain = base_domain

    async def extract(self, page_url: str) -> ExtractionResult:
        try:
            page = await self.fetcher.fetch(page_url)
        except FetchError as exc:
            logger.info("Fetch failed: %s", exc)
            return ExtractionResult()
        # parsing is CPU bound, keep it off the event loop
        return await asyncio.to_thread(parse_links, page, self.base_domain)
