# File: site_indexer/engine.py
"""site_indexer.engine: entry points shared by the CLI and tests."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from site_indexer.aggregator import CrawlReport
from site_indexer.config import IndexerConfig
from site_indexer.crawler.crawler import AsyncCrawler
from site_indexer.logger import logger
from site_indexer.report.corpus import rebuild_corpus as _rebuild_corpus

__all__ = ["start_crawl", "rebuild_corpus"]


async def start_crawl(url: str, cfg: Optional[IndexerConfig] = None) -> CrawlReport:
    """
    Crawl the domain of *url* and write its output.

    Parameters
    ----------
    url : str
        Seed URL.
    cfg : IndexerConfig, optional
        Crawl settings; defaults are used when omitted.

    Returns
    -------
    CrawlReport
        Pages, failures and output paths of the run.
    """
    async with AsyncCrawler(url, cfg) as crawler:
        return await crawler.crawl()


def rebuild_corpus(domain: str, cfg: Optional[IndexerConfig] = None) -> Path:
    """Regenerate ``llms-full.txt`` for *domain* from files already on disk."""
    cfg = cfg or IndexerConfig()
    domain_dir = Path(cfg.output_dir) / domain
    logger.info("Generating corpus from existing files in %s", domain_dir)
    return _rebuild_corpus(domain_dir)
