# site_indexer/crawler/limiter.py
"""
Admission gate that bounds how many page fetches run at once.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")


class ConcurrencyLimiter:
    """Fixed-capacity gate built on :class:`asyncio.Semaphore`.

    Waiters are woken in the order they called :meth:`acquire`.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.active = 0
        self._semaphore = asyncio.Semaphore(capacity)

    async def acquire(self) -> None:
        await self._semaphore.acquire()
        self.active += 1

    def release(self) -> None:
        if self.active <= 0:
            raise RuntimeError("release() called without a matching acquire()")
        self.active -= 1
        self._semaphore.release()

    async def __aenter__(self) -> ConcurrencyLimiter:
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.release()

    async def run(self, func: Callable[..., Awaitable[T]], *args: Any) -> T:
        """Await ``func(*args)`` while holding a slot."""
        async with self:
            return await func(*args)
