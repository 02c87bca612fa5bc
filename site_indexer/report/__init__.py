# File: site_indexer/report/__init__.py
"""site_indexer.report: writers for page files, the corpus and the failure report."""

from site_indexer.report.corpus import CORPUS_FILENAME, FAILURES_FILENAME, OutputWriter, rebuild_corpus
from site_indexer.report.json_report import render_failures

__all__ = ["CORPUS_FILENAME", "FAILURES_FILENAME", "OutputWriter", "rebuild_corpus", "render_failures"]
