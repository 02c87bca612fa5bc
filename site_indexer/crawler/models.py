# site_indexer/crawler/models.py
"""
Data models for the SiteIndexer crawler.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

#: Referrer recorded for the seed URL.
INITIAL_REFERRER = "Initial URL"

CanonicalURL = str


@dataclass(frozen=True, slots=True)
class FrontierEntry:
    """A queued URL together with the page it was first discovered on."""

    url: CanonicalURL
    referrer: str = INITIAL_REFERRER


@dataclass(frozen=True, slots=True)
class PageResult:
    """Holds the URL, title and raw Markdown content of a crawled page."""

    url: CanonicalURL
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class FailureRecord:
    """A URL that could not be fetched or parsed, and why."""

    url: CanonicalURL
    reason: str
    referrer: str = INITIAL_REFERRER

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)
