# File: link_scout/engine.py
"""link_scout.engine: Orchestration layer: жизненный цикл пула задач, ожидание и остановка обхода."""

from __future__ import annotations

import asyncio
import time
import warnings
from typing import List, Optional, Tuple

from aiohttp import ClientSession, ClientTimeout

from link_scout.config import CrawlerConfig
from link_scout.crawler.crawler import CrawlScheduler
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.frontier import Frontier
from link_scout.crawler.link_extractor import LinkExtractor
from link_scout.crawler.pool import TaskPool
from link_scout.crawler.results import ResultMap
from link_scout.errors import ShutdownTimeoutWarning
from link_scout.logger import logger
from link_scout.utils import canonical_url, parse_seed

__all__ = ["Engine", "start_crawl"]


class Engine:
    """Фасад для CLI и тестов: один вызов :meth:`run` означает один независимый обход."""

    def __init__(self, config: Optional[CrawlerConfig] = None) -> None:
        self.config = config or CrawlerConfig()
        self.frontier = Frontier()
        self.results = ResultMap()

    async def run(self, seed_url: str) -> List[Tuple[str, str]]:
        """Обходит сайт начиная с *seed_url* и возвращает отсортированные пары (host, label)."""
        base_domain = parse_seed(seed_url)
        self.frontier = Frontier()
        self.results = ResultMap()
        pool = TaskPool(self.config.concurrency)

        logger.info("Starting crawl: %s (base domain %s)", seed_url, base_domain)
        start = time.monotonic()
        async with ClientSession(
            timeout=ClientTimeout(total=self.config.request_timeout),
            headers={"User-Agent": self.config.user_agent},
        ) as session:
            extractor = LinkExtractor(Fetcher(session), base_domain)
            scheduler = CrawlScheduler(self.frontier, self.results, extractor, pool)
            scheduler.schedule(canonical_url(seed_url))
            pool.close()
            await self._shutdown(pool)

        duration = time.monotonic() - start
        logger.info(
            "Finished: %d URLs dispatched, %d hosts in %.2f s",
            len(self.frontier), len(self.results), duration,
        )
        return self.results.snapshot()

    async def _shutdown(self, pool: TaskPool) -> None:
        """Ждёт опустошения пула; по таймауту отменяет задачи и ждёт ещё немного."""
        try:
            if await pool.join(self.config.drain_timeout):
                return
            logger.warning(
                "Crawl did not finish within %.0f s, cancelling %d pending tasks",
                self.config.drain_timeout, pool.cancel(),
            )
            if await pool.join(self.config.cancel_timeout):
                return
            message = f"Worker pool did not terminate within {self.config.cancel_timeout:.0f} s after cancellation"
            logger.warning(message)
            warnings.warn(message, ShutdownTimeoutWarning, stacklevel=2)
        except asyncio.CancelledError:
            logger.warning("Crawl interrupted, abandoning %d pending tasks", pool.cancel())
            raise


def start_crawl(seed_url: str, config: Optional[CrawlerConfig] = None) -> List[Tuple[str, str]]:
    """Синхронная обёртка над :meth:`Engine.run`; при Ctrl-C возвращает уже собранное."""
    engine = Engine(config)
    try:
        return asyncio.run(engine.run(seed_url))
    except KeyboardInterrupt:
        logger.warning("Interrupted, returning partial results (%d hosts)", len(engine.results))
        return engine.results.snapshot()
