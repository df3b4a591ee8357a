from __future__ import annotations

import atexit
import datetime as dt
import logging
import os
from pathlib import Path
from typing import Optional

from .config import config_home

LOG_ENV = "FILECACHE_LOG"
SESSION_LOG_ENV = "FILECACHE_SESSION_LOG"

_LOGGER = logging.getLogger("filecache")
_SESSION_LOG_PATH: Path | None = None
_SHUTDOWN_REGISTERED = False


def configure_logging(log_dir: Path | None = None) -> Path:
    """Attach session file (and optional stream) handlers to ``filecache``."""

    global _SESSION_LOG_PATH, _SHUTDOWN_REGISTERED

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    if _SESSION_LOG_PATH is None:
        target_dir = Path(log_dir) if log_dir is not None else config_home() / "logs"
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d-%H%M%S")
        _SESSION_LOG_PATH = target_dir / f"session-{timestamp}.txt"
        session_handler = logging.FileHandler(_SESSION_LOG_PATH, encoding="utf-8")
        session_handler.setLevel(logging.DEBUG)
        session_handler.setFormatter(formatter)
        _LOGGER.addHandler(session_handler)

        if os.environ.get(LOG_ENV, "").lower() == "debug":
            stream_handler = logging.StreamHandler()
            stream_handler.setLevel(logging.DEBUG)
            stream_handler.setFormatter(formatter)
            _LOGGER.addHandler(stream_handler)

        _LOGGER.setLevel(logging.DEBUG)
        os.environ[SESSION_LOG_ENV] = str(_SESSION_LOG_PATH)
        _LOGGER.info("Session log initialised at %s", _SESSION_LOG_PATH)

    if not _SHUTDOWN_REGISTERED:
        atexit.register(logging.shutdown)
        _SHUTDOWN_REGISTERED = True

    return _SESSION_LOG_PATH


def get_session_log_path() -> Optional[Path]:
    """Return the current session log path if available."""

    if SESSION_LOG_ENV in os.environ:
        return Path(os.environ[SESSION_LOG_ENV])
    return _SESSION_LOG_PATH


__all__ = ["LOG_ENV", "configure_logging", "get_session_log_path"]
