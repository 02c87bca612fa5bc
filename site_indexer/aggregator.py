# File: site_indexer/aggregator.py
"""site_indexer.aggregator: Summary of a finished crawl."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from site_indexer.crawler.models import FailureRecord, PageResult


@dataclass(slots=True)
class CrawlReport:
    """Results of a crawl: pages in dispatch order, failures and output paths."""

    start_url: str
    domain: str
    pages: List[PageResult] = field(default_factory=list)
    failures: List[FailureRecord] = field(default_factory=list)
    visited: int = 0
    corpus_path: Optional[Path] = None
    failures_path: Optional[Path] = None

    @property
    def successful(self) -> int:
        return len(self.pages)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def summary(self) -> Dict[str, Any]:
        """Everything except page bodies, JSON-serializable."""
        return {
            "start_url": self.start_url,
            "domain": self.domain,
            "visited": self.visited,
            "successful": self.successful,
            "failed": self.failed,
            "pages": [{"url": p.url, "title": p.title} for p in self.pages],
            "failures": [f.as_dict() for f in self.failures],
            "corpus_path": str(self.corpus_path) if self.corpus_path else None,
            "failures_path": str(self.failures_path) if self.failures_path else None,
        }

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.summary(), ensure_ascii=False, indent=2 if pretty else None)
