"""
Cancellable pool of asyncio tasks with drain-wait semantics.

Running units may keep submitting work after :meth:`TaskPool.close`;
only callers outside the pool are rejected.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional, Set

from link_scout.logger import logger

__all__ = ("TaskPool",)


class TaskPool:
    """Tracks crawl units and bounds how many of them run at once."""

    def __init__(self, concurrency: int) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self._semaphore = asyncio.Semaphore(concurrency)
        self._tasks: Set[asyncio.Task[Any]] = set()
        self._idle = asyncio.Event()
        self._idle.set()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._tasks)

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, func: Callable[..., Awaitable[Any]], *args: Any) -> asyncio.Task[Any]:
        """Schedule ``func(*args)`` as a new unit of work."""
        if self._closed and asyncio.current_task() not in self._tasks:
            raise RuntimeError("pool is closed to external submissions")
        task = asyncio.create_task(self._run(func, *args))
        self._tasks.add(task)
        self._idle.clear()
        task.add_done_callback(self._on_done)
        return task

    def close(self) -> None:
        """No further submissions from outside the pool."""
        self._closed = True

    async def join(self, timeout: Optional[float] = None) -> bool:
        """Wait until no unit is outstanding. Return False if *timeout* elapsed first."""
        try:
            await asyncio.wait_for(self._idle.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True

    def cancel(self) -> int:
        """Request cancellation of every outstanding unit; return how many were signalled."""
        tasks = [t for t in self._tasks if not t.done()]
        for task in tasks:
            task.cancel()
        return len(tasks)

    async def _run(self, func: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        async with self._semaphore:
            return await func(*args)

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Unhandled error in crawl unit: %r", task.exception())
        if not self._tasks:
            self._idle.set()
