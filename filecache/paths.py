"""Resolve logical file names to locations in the user's documents directory."""
from __future__ import annotations

import os
from pathlib import Path

from .errors import DirectoryNotFound
from .records import FileFormat

DOCUMENTS_ENV = "FILECACHE_DOCUMENTS_DIR"


def documents_dir(override: Path | str | None = None) -> Path:
    """Return the writable base directory for cache files.

    Resolution order is *override*, ``$FILECACHE_DOCUMENTS_DIR`` and finally
    ``~/Documents``. The directory must already exist.
    """

    if override is not None:
        base = Path(override).expanduser()
    elif os.environ.get(DOCUMENTS_ENV):
        base = Path(os.environ[DOCUMENTS_ENV]).expanduser()
    else:
        try:
            base = Path.home() / "Documents"
        except (RuntimeError, KeyError) as exc:
            raise DirectoryNotFound("Document directory") from exc
    if not base.is_dir():
        raise DirectoryNotFound(str(base))
    return base


def resolve_path(
    file_name: str,
    fmt: FileFormat | str,
    base: Path | str | None = None,
) -> Path:
    """Return ``<documents>/<file_name>.<extension>`` for *fmt*."""

    name = (file_name or "").strip()
    if not name or name in {".", ".."} or "/" in name or os.sep in name:
        raise ValueError(f"Invalid file name: {file_name!r}")
    extension = FileFormat.parse(fmt).extension
    return documents_dir(base) / f"{name}.{extension}"


__all__ = ["DOCUMENTS_ENV", "documents_dir", "resolve_path"]
