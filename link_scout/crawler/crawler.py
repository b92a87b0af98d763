# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

from link_scout.crawler.frontier import Frontier
from link_scout.crawler.link_extractor import LinkExtractor
from link_scout.crawler.pool import TaskPool
from link_scout.crawler.results import ResultMap
from link_scout.logger import logger

__all__ = ("CrawlScheduler",)


class CrawlScheduler:
    """Рекурсивный планировщик: каждый новый URL становится отдельной задачей в пуле."""

    def __init__(
        self,
        frontier: Frontier,
        results: ResultMap,
        extractor: LinkExtractor,
        pool: TaskPool,
    ) -> None:
        self.frontier = frontier
        self.results = results
        self.extractor = extractor
        self.pool = pool

    def schedule(self, url: str) -> bool:
        """Dispatch *url* unless it was seen before. Returns True if a unit was submitted."""
        if not self.frontier.try_visit(url):
            return False
        logger.debug("Scheduling %s", url)
        self.pool.submit(self._crawl_unit, url)
        return True

    async def _crawl_unit(self, url: str) -> None:
        try:
            extracted = await self.extractor.extract(url)
            for host, label in extracted.observations:
                self.results.record(host, label)
            for link in extracted.internal_links:
                self.schedule(link)
        except Exception as exc:
            # ошибка одной страницы не должна останавливать обход
            logger.warning("Error crawling %s: %s", url, exc)
