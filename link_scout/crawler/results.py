"""
Host → label mapping filled concurrently by crawl units.
"""
from __future__ import annotations

import threading
from typing import Dict, List, Tuple


class ResultMap:
    """Last label observed per host. Last write wins."""

    def __init__(self) -> None:
        self._labels: Dict[str, str] = {}
        self._lock = threading.Lock()

    def record(self, host: str, label: str) -> None:
        with self._lock:
            self._labels[host] = label

    def snapshot(self) -> List[Tuple[str, str]]:
        """Return ``(host, label)`` pairs sorted by label, then host."""
        with self._lock:
            items = list(self._labels.items())
        return sorted(items, key=lambda item: (item[1], item[0]))

    def __len__(self) -> int:
        with self._lock:
            return len(self._labels)
