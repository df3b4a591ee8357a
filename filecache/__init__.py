"""Generic in-memory object cache persisted to JSON or delimited-text files."""

__version__ = "0.1.0"

from .config import CacheOptions, Config, load_config
from .errors import (
    DirectoryNotFound,
    FileCacheError,
    PartialDecodeError,
    SerializationError,
)
from .paths import documents_dir, resolve_path
from .records import Document, FileFormat, Record, is_document
from .store import FileCache
from .todo import TodoItem

__all__ = [
    "CacheOptions",
    "Config",
    "load_config",
    "DirectoryNotFound",
    "FileCacheError",
    "PartialDecodeError",
    "SerializationError",
    "documents_dir",
    "resolve_path",
    "Document",
    "FileFormat",
    "Record",
    "is_document",
    "FileCache",
    "TodoItem",
]
