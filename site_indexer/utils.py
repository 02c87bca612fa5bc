# File: site_indexer/utils.py
"""site_indexer.utils: Markdown clean-up, URL-to-file mapping and small helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import List, Sequence
from urllib.parse import unquote, urlsplit

__all__: Sequence[str] = (
    "clean_content",
    "url_to_relpath",
    "relpath_to_title",
    "extract_domain",
    "utc_timestamp",
)

_TIGHT_PREFIXES = ("#", "*", "-")


def _is_tight(line: str) -> bool:
    """Headings and list items never get a blank neighbour."""
    return line.startswith(_TIGHT_PREFIXES)


def clean_content(content: str) -> str:
    """
    Tidy converted Markdown.

    Strips the text and every line, then reduces each run of blank lines
    between two non-blank lines to a single blank line, or to nothing when
    either neighbour is a heading or list item.
    """
    lines = [line.strip() for line in content.strip().split("\n")]
    cleaned: List[str] = []
    pending_blank = False
    for line in lines:
        if not line:
            pending_blank = True
            continue
        if pending_blank and cleaned and not _is_tight(cleaned[-1]) and not _is_tight(line):
            cleaned.append("")
        pending_blank = False
        cleaned.append(line)
    return "\n".join(cleaned)


def url_to_relpath(url: str) -> PurePosixPath:
    """
    Map a page URL to its Markdown file path, relative to the domain directory.

    ``/`` gives ``index.md``, ``/docs/api`` gives ``docs/api.md`` and a
    trailing slash gives ``<dir>/index.md``. Dot segments are dropped.
    """
    path = unquote(urlsplit(url).path)
    if not path or path.endswith("/"):
        path += "index"
    parts = [part for part in path.split("/") if part not in ("", ".", "..")]
    if not parts:
        parts = ["index"]
    if not parts[-1].endswith(".md"):
        parts[-1] += ".md"
    return PurePosixPath(*parts)


def relpath_to_title(relpath: PurePosixPath | str) -> str:
    """``b/c.md`` -> ``b - c``."""
    text = PurePosixPath(relpath).as_posix()
    if text.endswith(".md"):
        text = text[: -len(".md")]
    return text.replace("/", " - ")


def extract_domain(url: str) -> str:
    """Return the host (with port) of *url*."""
    return urlsplit(url).netloc.rpartition("@")[2]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
