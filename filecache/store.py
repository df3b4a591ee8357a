"""In-memory object cache that persists to JSON or delimited-text files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Generic, Iterable, Iterator, Optional

from .codecs import DecodeResult, csv_codec, json_codec
from .config import CacheOptions
from .errors import FileCacheError, PartialDecodeError
from .paths import resolve_path
from .records import FileFormat, R

LOGGER = logging.getLogger(__name__)


class FileCache(Generic[R]):
    """Ordered collection of records with unique ids, saved on demand.

    Saving never raises by default: failures are logged on the
    ``filecache.store`` logger and the call returns normally. Loading always
    raises and replaces the whole in-memory collection on success.
    """

    def __init__(
        self,
        record_type: type[R],
        options: CacheOptions | None = None,
        *,
        documents_dir: Path | str | None = None,
    ) -> None:
        self.record_type = record_type
        self.options = options or CacheOptions()
        self.documents_dir = Path(documents_dir) if documents_dir is not None else None
        self._objects: list[R] = []

    # ------------------------------------------------------------------
    @property
    def objects(self) -> list[R]:
        return list(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._objects))

    def __contains__(self, object_id: object) -> bool:
        return any(obj.id == object_id for obj in self._objects)

    def get(self, object_id: Any) -> R | None:
        for obj in self._objects:
            if obj.id == object_id:
                return obj
        return None

    # --- mutation ------------------------------------------------------
    def add(self, obj: Optional[R]) -> None:
        """Append *obj* unless it is ``None`` or its id is already present."""

        if obj is None:
            return
        if obj.id in self:
            LOGGER.debug("Ignoring duplicate id %r", obj.id)
            return
        self._objects.append(obj)

    def delete(self, object_id: Any) -> None:
        self._objects = [obj for obj in self._objects if obj.id != object_id]

    def clear(self) -> None:
        self._objects = []

    # --- persistence ---------------------------------------------------
    def path_for(
        self,
        file_name: Optional[str] = None,
        format: FileFormat | str | None = None,
    ) -> Path:
        """Return the file a save/load with these arguments would use."""

        opts = self.options.merge(file_name, format)
        return resolve_path(opts.file_name, opts.format, self.documents_dir)

    def save(
        self,
        objects: Optional[Iterable[R]] = None,
        file_name: Optional[str] = None,
        format: FileFormat | str | None = None,
        separator: Optional[str] = None,
        *,
        strict: bool = False,
    ) -> None:
        """Persist *objects* (or the cached collection) to a file.

        Errors are reported through logging and swallowed unless *strict*
        is set, in which case they propagate.
        """

        try:
            opts = self.options.merge(file_name, format, separator)
            payload = list(objects) if objects is not None else list(self._objects)
            path = resolve_path(opts.file_name, opts.format, self.documents_dir)
            if opts.format is FileFormat.JSON:
                json_codec.encode(payload, path)
            else:
                csv_codec.encode(payload, path, self.record_type, opts.separator)
        except (FileCacheError, OSError, ValueError, TypeError) as exc:
            if strict:
                raise
            target = file_name if file_name is not None else self.options.file_name
            LOGGER.error("Error saving %s: %s", target, exc)
            return
        LOGGER.info("Saved %d records to %s", len(payload), path)

    def load(
        self,
        file_name: Optional[str] = None,
        format: FileFormat | str | None = None,
        separator: Optional[str] = None,
        *,
        strict: bool = False,
    ) -> list[R]:
        """Replace the cached collection with the contents of a file.

        Entries that fail to parse are dropped. With *strict* a
        :class:`PartialDecodeError` is raised instead and the cache is left
        untouched.
        """

        opts = self.options.merge(file_name, format, separator)
        path = resolve_path(opts.file_name, opts.format, self.documents_dir)
        result: DecodeResult[R]
        if opts.format is FileFormat.JSON:
            result = json_codec.decode(path, self.record_type)
        else:
            result = csv_codec.decode(path, self.record_type, opts.separator)
        if result.skipped:
            if strict:
                raise PartialDecodeError(result.objects, result.skipped)
            LOGGER.warning(
                "Dropped %d unparsable entries from %s", len(result.skipped), path
            )
        self._objects = list(result.objects)
        LOGGER.info("Loaded %d records from %s", len(self._objects), path)
        return list(self._objects)


__all__ = ["FileCache"]
