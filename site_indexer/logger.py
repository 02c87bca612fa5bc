# === FILE: site_indexer/logger.py ===
"""Logging setup for **SiteIndexer**.

One named logger is shared by every module::

    from site_indexer.logger import logger
    logger.info("Crawl started")

It writes to the console (stdout unless told otherwise) and, optionally, to
a size-rotated log file. The CLI calls :func:`init_logging` once per run
with the level, file and format picked on the command line.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, TextIO, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "SiteIndexer"
_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3

_LevelT = Union[int, str]


def _console_handler(fmt: str, stream: TextIO | None) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    stream: TextIO | None = None,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the ``SiteIndexer`` logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional path of a rotating log file (5 MiB, 3 backups).
    log_format
        Format string for :class:`logging.Formatter`.
    stream
        Console stream; ``None`` means ``sys.stdout`` at call time.
    replace_handlers
        Drop existing handlers first instead of appending.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        lg.handlers.clear()

    lg.addHandler(_console_handler(log_format, stream))
    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))

    lg.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Replace all handlers in one call; used by the CLI."""
    return configure(
        level=level,
        log_file=log_file,
        log_format=log_format,
        stream=stream,
        replace_handlers=True,
    )


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging"]
