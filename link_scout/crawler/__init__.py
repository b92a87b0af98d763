"""link_scout.crawler: frontier, result map, task pool, link extraction and scheduling."""

from link_scout.crawler.crawler import CrawlScheduler
from link_scout.crawler.frontier import Frontier
from link_scout.crawler.link_extractor import LinkExtractor, parse_links, resolve_link
from link_scout.crawler.models import ExtractionResult, Observation, PageData
from link_scout.crawler.pool import TaskPool
from link_scout.crawler.results import ResultMap

__all__ = [
    "CrawlScheduler",
    "ExtractionResult",
    "Frontier",
    "LinkExtractor",
    "Observation",
    "PageData",
    "ResultMap",
    "TaskPool",
    "parse_links",
    "resolve_link",
]
