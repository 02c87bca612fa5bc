# site_indexer/crawler/link_extractor.py
"""
Link extraction and URL normalization utilities for SiteIndexer.

Hrefs found on a page go through three steps before they reach the frontier:
:func:`is_navigable` drops things that are not pages at all, :func:`normalize_url`
turns the href into a canonical absolute URL relative to the crawl context, and
:func:`is_in_scope` keeps only the seed host and its subdomains.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Container, Iterable, List
from urllib.parse import urljoin, urlsplit, urlunsplit

from site_indexer.logger import logger

__all__ = (
    "UrlContext",
    "normalize_url",
    "is_in_scope",
    "is_navigable",
    "extract_links",
)

_VERSION_RE = re.compile(r"^v\d|^\d{4}")
_SKIP_PREFIXES = ("#", "mailto:", "tel:")


@dataclass(frozen=True, slots=True)
class UrlContext:
    """Scheme, host and base path of the seed URL."""

    scheme: str
    host: str
    base_path: str = "/"

    @classmethod
    def from_url(cls, url: str) -> UrlContext:
        parts = urlsplit(url)
        base_path = parts.path or "/"
        if not base_path.endswith("/"):
            base_path += "/"
        return cls(scheme=parts.scheme or "https", host=parts.netloc, base_path=base_path)

    @property
    def origin(self) -> str:
        return f"{self.scheme}://{self.host}"

    @property
    def base_segments(self) -> List[str]:
        return _segments(self.base_path)


def _segments(path: str) -> List[str]:
    return [part for part in path.split("/") if part]


def _host_key(netloc: str) -> str:
    return netloc.rpartition("@")[2].lower()


def _rebase_path(path: str, context: UrlContext) -> str:
    """Map a path sharing the base path's first segment into the crawl context.

    Returns *path* itself when it already lies under the base path or carries
    its own version-like segment, otherwise the base path plus the segments
    following the first one.
    """
    parts = _segments(path)
    if path.startswith(context.base_path):
        return path
    for index, part in enumerate(parts[1:], start=1):
        if _VERSION_RE.match(part):
            # first version-like segment wins
            return "/" + "/".join(parts[: index + 1]) + "/" + "/".join(parts[index + 1:])
    return context.base_path + "/".join(parts[1:])


def _shares_first_segment(path: str, context: UrlContext) -> bool:
    return _segments(path)[:1] == context.base_segments[:1]


def normalize_url(href: str, context: UrlContext) -> str:
    """Return the canonical absolute form of *href*.

    Never raises: a href that cannot be parsed is returned unchanged.
    """
    try:
        url = href.split("#", 1)[0]

        if url.startswith(("http://", "https://")):
            parts = urlsplit(url)
            if _host_key(parts.netloc) != _host_key(context.host):
                return url
            path = parts.path or "/"
            if _shares_first_segment(path, context):
                path = _rebase_path(path, context)
            return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))

        if url.startswith("//"):
            return f"{context.scheme}:{url}"

        if url.startswith("/"):
            if _shares_first_segment(url, context):
                path, sep, query = url.partition("?")
                return context.origin + _rebase_path(path, context) + sep + query
            return context.origin + url

        return urljoin(context.origin + context.base_path, url)
    except ValueError as exc:
        logger.debug("Could not normalize %r: %s", href, exc)
        return href


def is_in_scope(url: str, base_host: str) -> bool:
    """True if *url* is on *base_host* or one of its subdomains."""
    try:
        host = _host_key(urlsplit(url).netloc)
    except ValueError:
        return False
    if not host:
        return False
    base_labels = _host_key(base_host).split(".")
    labels = host.split(".")
    if len(labels) < len(base_labels):
        return False
    return labels[-len(base_labels):] == base_labels


def is_navigable(href: str | None) -> bool:
    """Reject empty, fragment-only, mailto:, tel: and javascript: hrefs."""
    if not href:
        return False
    href = href.strip()
    if not href or href.startswith(_SKIP_PREFIXES):
        return False
    return "javascript:" not in href


def extract_links(
    hrefs: Iterable[str],
    context: UrlContext,
    exclude: Container[str] = (),
) -> List[str]:
    """
    Turn raw hrefs into in-scope canonical URLs.

    URLs contained in *exclude* (usually the visited set) are dropped;
    duplicates are removed, preserving first-seen order.
    """
    links: List[str] = []
    seen: set[str] = set()
    for href in hrefs:
        if not is_navigable(href):
            continue
        url = normalize_url(href.strip(), context)
        if url in seen or url in exclude:
            continue
        if not url.startswith(("http://", "https://")) or not is_in_scope(url, context.host):
            continue
        seen.add(url)
        links.append(url)
    return links
