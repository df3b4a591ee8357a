"""Delimited-text (CSV) codec."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..records import R
from .codec_base import DecodeResult, parse_entries

DEFAULT_SEPARATOR = ";"
_FORBIDDEN_SEPARATORS = {"\n", "\r", '"'}


def validate_separator(separator: str) -> str:
    """Return *separator* if it is usable as a single-character delimiter."""

    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}")
    if separator in _FORBIDDEN_SEPARATORS:
        raise ValueError(f"Unsupported separator: {separator!r}")
    return separator


def header(record_type: type[R], separator: str = DEFAULT_SEPARATOR) -> str:
    return validate_separator(separator).join(record_type.field_names())


def render(
    objects: Sequence[R],
    record_type: type[R],
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Render a header line followed by one line per record."""

    lines = [header(record_type, separator)]
    lines.extend(obj.to_line(separator) for obj in objects)
    return "\n".join(lines)


def parse(
    text: str,
    record_type: type[R],
    separator: str = DEFAULT_SEPARATOR,
) -> DecodeResult[R]:
    """Parse delimited text, ignoring the header and empty lines.

    A trailing carriage return is removed from each line. Text without
    any non-empty line decodes to an empty result.
    """

    validate_separator(separator)
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return DecodeResult()
    return parse_entries(
        lines[1:], lambda line: record_type.from_line(line, separator)
    )


def encode(
    objects: Sequence[R],
    path: Path,
    record_type: type[R],
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Write *objects* to *path* as UTF-8 text, replacing any existing file."""

    text = render(objects, record_type, separator)
    Path(path).write_text(text, encoding="utf-8", newline="")


def decode(
    path: Path,
    record_type: type[R],
    separator: str = DEFAULT_SEPARATOR,
) -> DecodeResult[R]:
    # newline="" keeps a lone "\r" inside a quoted field intact.
    with Path(path).open("r", encoding="utf-8", newline="") as fh:
        text = fh.read()
    return parse(text, record_type, separator)


__all__ = [
    "DEFAULT_SEPARATOR",
    "validate_separator",
    "header",
    "render",
    "parse",
    "encode",
    "decode",
]
