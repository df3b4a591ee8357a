"""Error types raised by the file cache."""
from __future__ import annotations

from typing import Any, Sequence


class FileCacheError(RuntimeError):
    """Raised when the cache encounters an unrecoverable error."""


class DirectoryNotFound(FileCacheError):
    """Raised when the base documents directory cannot be located."""

    def __init__(self, directory: str | None = None) -> None:
        self.directory = directory
        if directory:
            message = f"Directory not found: {directory}"
        else:
            message = "Directory not found"
        super().__init__(message)


class SerializationError(FileCacheError):
    """Raised when a structured document cannot be encoded or decoded."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"Serialization error: {cause}")


class PartialDecodeError(FileCacheError):
    """Raised by strict loads when some persisted entries failed to parse."""

    def __init__(self, objects: Sequence[Any], skipped: Sequence[Any]) -> None:
        self.objects = list(objects)
        self.skipped = list(skipped)
        super().__init__(
            f"{len(self.skipped)} entries could not be parsed "
            f"({len(self.objects)} decoded)"
        )


__all__ = [
    "FileCacheError",
    "DirectoryNotFound",
    "SerializationError",
    "PartialDecodeError",
]
