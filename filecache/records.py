"""Record capability protocol and the structured document type."""
from __future__ import annotations

import math
from enum import Enum
from typing import Any, Protocol, Sequence, TypeAlias, TypeVar, Union

Document: TypeAlias = Union[
    None, bool, int, float, str, list["Document"], dict[str, "Document"]
]


class FileFormat(str, Enum):
    """Supported on-disk formats; the value doubles as the file extension."""

    JSON = "json"
    CSV = "csv"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "FileFormat | str") -> "FileFormat":
        if isinstance(value, cls):
            return value
        normalised = str(value or "").strip().lower().lstrip(".")
        for member in cls:
            if member.value == normalised:
                return member
        raise ValueError(f"Unsupported file format: {value!r}")


class Record(Protocol):
    """Capabilities a value needs to be kept in a :class:`FileCache`.

    ``id`` is the identity key: two records with equal ids are the same
    entry as far as the cache is concerned. The ``from_*`` constructors
    return ``None`` for input they cannot understand.
    """

    @property
    def id(self) -> Any:
        ...

    def to_record(self) -> Document:
        """Return the structured view used by the JSON format."""

    @classmethod
    def from_record(cls, value: Any) -> "Record | None":
        """Rebuild a record from its structured view."""

    @classmethod
    def field_names(cls) -> Sequence[str]:
        """Ordered field names used for the delimited-text header."""

    def to_line(self, separator: str) -> str:
        """Render the record as one delimited-text line."""

    @classmethod
    def from_line(cls, line: str, separator: str) -> "Record | None":
        """Rebuild a record from one delimited-text line."""


R = TypeVar("R", bound=Record)


def is_document(value: Any, *, top_level: bool = True) -> bool:
    """Return ``True`` when *value* can be written as a JSON document.

    The top level must be a list or a mapping, mapping keys must be strings
    and floats must be finite.
    """

    if top_level and not isinstance(value, (list, dict)):
        return False
    if value is None or isinstance(value, (bool, int, str)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, list):
        return all(is_document(item, top_level=False) for item in value)
    if isinstance(value, dict):
        return all(
            isinstance(key, str) and is_document(item, top_level=False)
            for key, item in value.items()
        )
    return False


__all__ = ["Document", "FileFormat", "Record", "R", "is_document"]
