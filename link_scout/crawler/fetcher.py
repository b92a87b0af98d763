# link_scout/crawler/fetcher.py
"""
Fetcher module: a single GET per page, no retries.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, InvalidURL
from link_scout.crawler.models import PageData
from link_scout.errors import FetchError


class Fetcher:
    """Downloads one HTML page through a shared aiohttp session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* once and return its decoded body.

        Raises FetchError on an invalid URL, connection error, timeout,
        HTTP status >= 400 or an undecodable body.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status}")
                text = await resp.text()
        except (UnicodeDecodeError, LookupError) as exc:
            raise FetchError(url, f"cannot decode response: {exc}") from exc
        except InvalidURL as exc:
            raise FetchError(url, f"invalid URL: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timeout") from exc
        except ClientError as exc:
            raise FetchError(url, f"connection error: {exc}") from exc
        except ValueError as exc:
            # yarl rejects some targets before aiohttp wraps them
            raise FetchError(url, f"invalid URL: {exc}") from exc
        return PageData(url, text)
