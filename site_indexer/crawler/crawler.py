# === FILE: site_indexer/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from aiohttp import ClientSession, ClientTimeout

from site_indexer.aggregator import CrawlReport
from site_indexer.config import IndexerConfig
from site_indexer.crawler.fetcher import Fetcher, FetchError
from site_indexer.crawler.frontier import Frontier
from site_indexer.crawler.limiter import ConcurrencyLimiter
from site_indexer.crawler.link_extractor import UrlContext, extract_links, normalize_url
from site_indexer.crawler.models import FailureRecord, FrontierEntry, PageResult
from site_indexer.parser.html_parser import html_to_markdown, parse_html
from site_indexer.report.corpus import OutputWriter
from site_indexer.utils import extract_domain

__all__ = ("PageOutcome", "AsyncCrawler")


@dataclass(frozen=True, slots=True)
class PageOutcome:
    """A crawled page and the new in-scope links found on it."""

    page: PageResult
    links: Tuple[str, ...] = ()


_Result = Union[PageOutcome, FailureRecord]


class AsyncCrawler:
    """Crawls one domain in waves of at most ``config.concurrency`` pages.

    Each instance is a single crawl session: frontier, counters and output
    buffers are never shared between runs.
    """

    def __init__(self, start_url: str, config: Optional[IndexerConfig] = None) -> None:
        self.config = config or IndexerConfig()
        self.context = UrlContext.from_url(start_url)
        self.start_url = normalize_url(start_url, self.context)
        self.domain = extract_domain(self.start_url)
        if not self.domain:
            raise ValueError(f"Not an absolute URL: {start_url!r}")
        self.frontier = Frontier()
        self.limiter = ConcurrencyLimiter(self.config.concurrency)
        self.writer = OutputWriter(self.config.output_dir, self.domain)
        self.pages: List[PageResult] = []
        self.failures: List[FailureRecord] = []
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("SiteIndexer")

    async def __aenter__(self) -> AsyncCrawler:
        timeout = ClientTimeout(total=self.config.timeout)
        self.session = ClientSession(
            timeout=timeout,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @property
    def successful(self) -> int:
        return len(self.pages)

    async def crawl(self) -> CrawlReport:
        if not self.session:
            raise RuntimeError("Session not initialized")
        self.logger.info("Starting to index %s", self.start_url)
        start = time.monotonic()
        fetcher = Fetcher(self.session)

        self.frontier.seed(self.start_url)
        wave = 0
        while self.frontier:
            batch = self.frontier.drain_batch(self.config.concurrency)
            dispatched = [entry for entry in batch if self.frontier.mark_visited(entry.url)]
            if not dispatched:
                continue
            wave += 1
            results = await asyncio.gather(
                *(self.limiter.run(self._process, fetcher, entry) for entry in dispatched)
            )
            for result in results:
                self._record(result)
            self.logger.info(
                "Wave %d: %d/%d pages (%d successful, %d failed)",
                wave,
                self.frontier.visited_count,
                self.frontier.size,
                self.successful,
                len(self.failures),
            )

        corpus_path = self.writer.write_corpus()
        failures_path = self.writer.write_failures(self.failures)
        if failures_path:
            self.logger.warning("Failed URLs saved to: %s", failures_path)

        duration = time.monotonic() - start
        self.logger.info(
            "Indexing complete! Processed %d pages (%d successful, %d failed) in %.2f s",
            self.frontier.visited_count,
            self.successful,
            len(self.failures),
            duration,
        )
        return CrawlReport(
            start_url=self.start_url,
            domain=self.domain,
            pages=list(self.pages),
            failures=list(self.failures),
            visited=self.frontier.visited_count,
            corpus_path=corpus_path,
            failures_path=failures_path,
        )

    async def _process(self, fetcher: Fetcher, entry: FrontierEntry) -> _Result:
        """Fetch, extract and save one page; failures become FailureRecords."""
        url = entry.url
        try:
            html = await fetcher.fetch(url)
            parsed = parse_html(html, url, self.config.noise_tags)
            content = html_to_markdown(parsed.body_html, self.config.heading_style)
        except FetchError as exc:
            self.logger.warning("Failed %s: %s", url, exc.reason)
            return FailureRecord(url=url, reason=exc.reason, referrer=self.frontier.referrer_of(url))

        links = extract_links(parsed.hrefs, self.context, exclude=self.frontier)
        page = PageResult(url=url, title=parsed.title, content=content)
        self.writer.write_page(page)
        self.logger.debug("Processed %s (%d new links)", url, len(links))
        return PageOutcome(page=page, links=tuple(links))

    def _record(self, result: _Result) -> None:
        """Fold one result into the session state; called in dispatch order."""
        if isinstance(result, FailureRecord):
            self.failures.append(result)
            return
        self.pages.append(result.page)
        self.writer.add_to_corpus(result.page)
        self.frontier.enqueue(result.links, result.page.url)

