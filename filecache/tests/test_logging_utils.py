from __future__ import annotations

import logging

import pytest

from filecache.logging_utils import configure_logging, get_session_log_path


@pytest.fixture(autouse=True)
def _isolated_logging(fresh_logging):
    return fresh_logging


def test_configure_logging_is_idempotent(tmp_path):
    first = configure_logging(tmp_path / "logs")
    second = configure_logging(tmp_path / "other")
    assert first == second
    assert first.parent == tmp_path / "logs"
    assert first.exists()
    assert get_session_log_path() == first


def test_store_messages_reach_session_log(tmp_path):
    path = configure_logging(tmp_path / "logs")
    assert path.parent == tmp_path / "logs"
    logging.getLogger("filecache.store").error("session log marker")
    for handler in logging.getLogger("filecache").handlers:
        handler.flush()
    assert "session log marker" in path.read_text(encoding="utf-8")


def test_debug_env_adds_stream_handler(tmp_path, monkeypatch, fresh_logging):
    monkeypatch.setenv("FILECACHE_LOG", "debug")
    configure_logging(tmp_path / "logs")
    kinds = {type(handler) for handler in fresh_logging.handlers}
    assert kinds == {logging.FileHandler, logging.StreamHandler}
