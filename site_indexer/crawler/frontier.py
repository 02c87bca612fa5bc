# site_indexer/crawler/frontier.py
"""
Crawl frontier: FIFO queue of discovered URLs, the visited set and the
referrer of every discovered URL.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, List, Set

from site_indexer.crawler.models import INITIAL_REFERRER, FrontierEntry


class Frontier:
    """Queue, visited set and referrer map of a single crawl."""

    def __init__(self) -> None:
        self._queue: Deque[FrontierEntry] = deque()
        self._visited: Set[str] = set()
        self._referrers: Dict[str, str] = {}

    def seed(self, url: str) -> None:
        """Queue the start URL with the ``Initial URL`` referrer."""
        self._referrers.setdefault(url, INITIAL_REFERRER)
        self._queue.append(FrontierEntry(url, INITIAL_REFERRER))

    def enqueue(self, links: Iterable[str], referrer: str) -> int:
        """
        Queue every link not discovered before, remembering *referrer*.

        The first referrer seen for a URL is kept. Returns the number of
        entries appended.
        """
        added = 0
        for link in links:
            if link in self._referrers:
                continue
            self._referrers[link] = referrer
            self._queue.append(FrontierEntry(link, referrer))
            added += 1
        return added

    def drain_batch(self, n: int) -> List[FrontierEntry]:
        """Remove and return up to *n* entries from the front of the queue."""
        batch: List[FrontierEntry] = []
        while self._queue and len(batch) < n:
            batch.append(self._queue.popleft())
        return batch

    def mark_visited(self, url: str) -> bool:
        """Add *url* to the visited set; False if it was already there."""
        if url in self._visited:
            return False
        self._visited.add(url)
        return True

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    def referrer_of(self, url: str) -> str:
        return self._referrers.get(url, INITIAL_REFERRER)

    @property
    def visited(self) -> frozenset[str]:
        return frozenset(self._visited)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    @property
    def size(self) -> int:
        """Queued plus visited entries; the total shown in progress output."""
        return len(self._queue) + len(self._visited)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __contains__(self, url: object) -> bool:
        return url in self._visited
