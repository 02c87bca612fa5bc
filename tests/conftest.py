# File: tests/conftest.py
from pathlib import Path

import pytest

from site_indexer.config import IndexerConfig
from site_indexer.crawler.link_extractor import UrlContext
from site_indexer.crawler.models import PageResult


@pytest.fixture()
def output_dir(tmp_path) -> Path:
    """Temporary root for crawl output."""
    return tmp_path / "output"


@pytest.fixture()
def basic_config(output_dir) -> IndexerConfig:
    """
    Return a basic valid IndexerConfig writing into a temp directory.
    """
    return IndexerConfig(
        concurrency=5,
        output_dir=output_dir,
        timeout=5.0,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def root_context() -> UrlContext:
    """Crawl context for a seed at the site root."""
    return UrlContext.from_url("https://x.test/")


@pytest.fixture()
def docs_context() -> UrlContext:
    """Crawl context for a seed inside versioned documentation."""
    return UrlContext.from_url("https://x.test/docs/v1/")


@pytest.fixture()
def mock_page() -> PageResult:
    """
    Provide a simple PageResult with Markdown content.
    """
    content = "# Guide\n\n\n  Intro text.  \n\n* one\n\n* two\n"
    return PageResult(url="https://x.test/docs/guide", title="Guide", content=content)
