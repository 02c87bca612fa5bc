# File: tests/test_logger.py
import io
import logging
from logging.handlers import RotatingFileHandler

import pytest

from site_indexer.logger import configure, init_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    init_logging()


def test_configure_writes_to_given_stream():
    stream = io.StringIO()
    lg = configure(level="DEBUG", stream=stream, log_format="%(levelname)s %(message)s")
    lg.debug("hello %s", "world")
    assert stream.getvalue() == "DEBUG hello world\n"
    assert lg.propagate is False


def test_log_file_handler(tmp_path):
    log_file = tmp_path / "indexer.log"
    lg = init_logging(level="INFO", log_file=log_file, stream=io.StringIO())
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    lg.info("to file")
    for handler in lg.handlers:
        handler.flush()
    assert "to file" in log_file.read_text(encoding="utf-8")


def test_replace_handlers():
    lg = configure(stream=io.StringIO())
    configure(stream=io.StringIO(), replace_handlers=False)
    assert len(lg.handlers) == 2
    configure(stream=io.StringIO())
    assert len(lg.handlers) == 1
    assert lg is logging.getLogger("SiteIndexer")
