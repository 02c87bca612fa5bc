# File: site_indexer/report/corpus.py
"""site_indexer.report.corpus: per-page Markdown files and the ``llms-full.txt`` corpus."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from site_indexer.crawler.models import FailureRecord, PageResult
from site_indexer.logger import logger
from site_indexer.report.json_report import render_failures
from site_indexer.utils import clean_content, relpath_to_title, url_to_relpath

CORPUS_FILENAME = "llms-full.txt"
FAILURES_FILENAME = "failed-urls.json"


class OutputWriter:
    """Writes everything a crawl produces under ``<output_dir>/<domain>/``."""

    def __init__(self, output_dir: Union[str, Path], domain: str) -> None:
        self.domain_dir = Path(output_dir) / domain
        self._sections: List[str] = []

    @property
    def corpus_path(self) -> Path:
        return self.domain_dir / CORPUS_FILENAME

    @property
    def failures_path(self) -> Path:
        return self.domain_dir / FAILURES_FILENAME

    def page_path(self, url: str) -> Path:
        return self.domain_dir.joinpath(*url_to_relpath(url).parts)

    def write_page(self, page: PageResult) -> Optional[Path]:
        """Save the raw Markdown of *page*; if the path cannot be written, log it and return None."""
        path = self.page_path(page.url)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(page.content, encoding="utf-8")
        except (OSError, ValueError) as exc:  # ValueError: NUL byte from a percent-decoded path
            logger.error("Could not write %s for %s: %s", path, page.url, exc)
            return None
        return path

    def add_to_corpus(self, page: PageResult) -> None:
        self._sections.append(f"# {page.title}\n\n{clean_content(page.content)}")

    @property
    def sections(self) -> Sequence[str]:
        return tuple(self._sections)

    def write_corpus(self) -> Path:
        """Join the accumulated sections and write ``llms-full.txt``."""
        self.domain_dir.mkdir(parents=True, exist_ok=True)
        self.corpus_path.write_text("\n\n".join(self._sections).strip(), encoding="utf-8")
        return self.corpus_path

    def write_failures(self, failures: Sequence[FailureRecord]) -> Optional[Path]:
        """Write ``failed-urls.json`` when anything failed."""
        if not failures:
            return None
        return render_failures(failures, self.failures_path)


def rebuild_corpus(domain_dir: Union[str, Path]) -> Path:
    """
    Rebuild ``llms-full.txt`` from the ``.md`` files already in *domain_dir*.

    Each file becomes a ``# <relative path>`` section; sections are separated
    by one blank line.
    """
    root = Path(domain_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Output directory not found: {root}")

    files = sorted(p for p in root.rglob("*.md") if p.is_file())
    logger.info("Generating %s from %d files in %s", CORPUS_FILENAME, len(files), root)

    sections: List[str] = []
    for file in files:
        relative = file.relative_to(root).as_posix()
        content = file.read_text(encoding="utf-8")
        sections.append(f"# {relpath_to_title(relative)}\n{clean_content(content)}")
        logger.debug("Added %s", relative)

    output = root / CORPUS_FILENAME
    output.write_text("\n\n".join(sections), encoding="utf-8")
    return output
