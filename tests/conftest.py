# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from typing import AsyncIterator, Awaitable, Callable, Dict, List, Union

import pytest
import pytest_asyncio
from aiohttp import web
from link_scout.config import CrawlerConfig
from link_scout.crawler.models import PageData

#: page body (HTML), bare HTTP status, or a full aiohttp handler
Route = Union[str, int, Callable[[web.Request], Awaitable[web.StreamResponse]]]


class PageServer:
    """Local aiohttp site that serves a dict of pages and counts hits per path."""

    def __init__(self, port: int) -> None:
        self.port = port
        self.hits: Counter[str] = Counter()
        self._runners: List[web.AppRunner] = []

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def start(self, pages: Dict[str, Route]) -> str:
        @web.middleware
        async def count_hits(request, handler):
            self.hits[request.path] += 1
            return await handler(request)

        app = web.Application(middlewares=[count_hits])
        for path, route in pages.items():
            app.router.add_get(path, self._handler(route))
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "localhost", self.port)
        await site.start()
        self._runners.append(runner)
        return self.url("/")

    @staticmethod
    def _handler(route: Route):
        if callable(route):
            return route
        if isinstance(route, int):
            async def status(_):
                return web.Response(status=route)
            return status

        async def html(_):
            return web.Response(text=route, content_type="text/html")
        return html

    async def close(self) -> None:
        for runner in self._runners:
            await runner.cleanup()


@pytest_asyncio.fixture
async def page_server(unused_tcp_port: int) -> AsyncIterator[PageServer]:
    server = PageServer(unused_tcp_port)
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture()
def fast_config() -> CrawlerConfig:
    """
    Return a CrawlerConfig with short timeouts for local crawls.
    """
    return CrawlerConfig(
        user_agent="TestAgent/1.0",
        request_timeout=2.0,
        concurrency=4,
        drain_timeout=10.0,
        cancel_timeout=2.0,
    )


@pytest.fixture()
def mock_page_data() -> PageData:
    """
    Provide a simple PageData instance with HTML content.
    """
    html = (
        '<html><body><a href="/link1">L1</a>'
        '<a href="http://external.com">X</a></body></html>'
    )
    return PageData(url="http://example.com/", content=html)
