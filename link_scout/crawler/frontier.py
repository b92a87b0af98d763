"""
Visited-URL set for one crawl run.
"""
from __future__ import annotations

import threading
from typing import Set


class Frontier:
    """Set of URLs already dispatched for crawling; entries are never removed."""

    def __init__(self) -> None:
        self._visited: Set[str] = set()
        self._lock = threading.Lock()

    def try_visit(self, url: str) -> bool:
        """Insert *url* and return True, or return False if it was already present."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
