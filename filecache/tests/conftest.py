from __future__ import annotations

import logging
from pathlib import Path

import pytest

from filecache import FileCache, logging_utils
from filecache.tests.sample_records import Item


@pytest.fixture
def documents(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / "Documents"
    path.mkdir()
    monkeypatch.setenv("FILECACHE_DOCUMENTS_DIR", str(path))
    return path


@pytest.fixture
def cache(documents: Path) -> FileCache[Item]:
    return FileCache(Item, documents_dir=documents)


@pytest.fixture
def fresh_logging(monkeypatch):
    """Give each test its own session log and restore the ``filecache`` logger."""

    logger = logging.getLogger("filecache")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    for handler in saved_handlers:
        logger.removeHandler(handler)
    monkeypatch.setattr(logging_utils, "_SESSION_LOG_PATH", None)
    monkeypatch.delenv(logging_utils.SESSION_LOG_ENV, raising=False)
    monkeypatch.delenv(logging_utils.LOG_ENV, raising=False)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
