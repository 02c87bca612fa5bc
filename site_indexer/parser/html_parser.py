# === FILE: site_indexer/parser/html_parser.py ===
"""HTML parsing utilities for SiteIndexer.

Turns a downloaded page into the pieces the crawler needs:

* title: document <title> text, or the page URL if absent/empty.
* hrefs: raw ``href`` values of the <a> tags left after noise removal.
* body_html: inner markup of <body>, ready for Markdown conversion.

Noise elements (scripts, navigation, page chrome) are removed *before* links
are collected, so menu and footer links are not followed.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable

from bs4 import BeautifulSoup
from markdownify import ATX, ATX_CLOSED, UNDERLINED, markdownify

from site_indexer.crawler.fetcher import PageParseError

__all__: Sequence[str] = ("NOISE_TAGS", "ParsedPage", "parse_html", "html_to_markdown")

NOISE_TAGS: tuple[str, ...] = ("script", "style", "nav", "footer", "header", "iframe")

_HEADING_STYLES = {
    "ATX": ATX,
    "ATX_CLOSED": ATX_CLOSED,
    "SETEXT": UNDERLINED,
    "UNDERLINED": UNDERLINED,
}


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    title: str
    hrefs: list[str]
    body_html: str


def parse_html(html: str, url: str, noise_tags: Iterable[str] = NOISE_TAGS) -> ParsedPage:
    """Parse *html* fetched from *url*.

    Raises
    ------
    PageParseError
        If the parser rejects the document.
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:  # html.parser raises assorted errors on garbage input
        raise PageParseError(f"Could not parse HTML: {exc}") from exc

    for element in soup(list(noise_tags)):
        element.decompose()

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    hrefs: list[str] = []
    for tag in soup.find_all("a", href=True):
        href = tag.get("href")
        if isinstance(href, str):
            hrefs.append(href)

    body = soup.body
    try:
        body_html = body.decode_contents() if body is not None else ""
    except RecursionError as exc:
        raise PageParseError("Could not parse HTML: markup nested too deeply") from exc

    return ParsedPage(url=url, title=title or url, hrefs=hrefs, body_html=body_html)


def html_to_markdown(body_html: str, heading_style: str = "ATX") -> str:
    """Convert an HTML fragment to Markdown (fenced code blocks, ATX headings by default).

    Raises
    ------
    PageParseError
        If markdownify cannot convert the fragment, e.g. nesting deeper than
        the interpreter's recursion limit.
    """
    if not body_html:
        return ""
    style = _HEADING_STYLES.get(heading_style.upper(), ATX)
    try:
        return markdownify(body_html, heading_style=style, bullets="*")
    except RecursionError as exc:
        raise PageParseError("Could not convert page to Markdown: markup nested too deeply") from exc
    except Exception as exc:  # markdownify has no error hierarchy of its own
        raise PageParseError(f"Could not convert page to Markdown: {exc}") from exc
