# site_indexer/crawler/fetcher.py
"""
Fetcher module: issues the HTTP GET for a page and returns its HTML text.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from site_indexer.logger import logger

__all__ = ("FetchError", "PageParseError", "Fetcher")


class FetchError(Exception):
    """A page could not be downloaded; ``reason`` ends up in the failure report."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class PageParseError(FetchError):
    """The response body could not be decoded or parsed as HTML."""


def _describe(exc: BaseException) -> str:
    message = str(exc)
    return message if message else type(exc).__name__


class Fetcher:
    """Downloads pages through a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> str:
        """
        GET *url* following redirects and return the decoded body.

        Raises FetchError on network errors, timeouts and non-2xx statuses,
        PageParseError if the body cannot be decoded.
        """
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url, allow_redirects=True, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(f"Request failed with status code {resp.status}")
                try:
                    return await resp.text()
                except (UnicodeDecodeError, LookupError) as exc:
                    raise PageParseError(f"Could not decode response body: {exc}") from exc
        except (ClientError, asyncio.TimeoutError) as exc:
            raise FetchError(_describe(exc)) from exc
