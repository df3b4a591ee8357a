"""Structured-record (JSON) codec."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from ..errors import SerializationError
from ..records import R, is_document
from .codec_base import DecodeResult, parse_entries


def dumps(objects: Sequence[R]) -> bytes:
    """Serialise *objects* to UTF-8 JSON bytes."""

    document = [obj.to_record() for obj in objects]
    if not is_document(document):
        raise SerializationError(f"Not a valid JSON object: {document!r}")
    try:
        text = json.dumps(document, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(exc) from exc
    return text.encode("utf-8")


def loads(data: bytes | str, record_type: type[R]) -> DecodeResult[R]:
    """Parse a JSON document and rebuild the records it lists."""

    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SerializationError(exc) from exc
    if not isinstance(document, list):
        return DecodeResult()
    return parse_entries(document, record_type.from_record)


def encode(objects: Sequence[R], path: Path) -> None:
    """Write *objects* to *path*, replacing any existing file."""

    data = dumps(objects)
    Path(path).write_bytes(data)


def decode(path: Path, record_type: type[R]) -> DecodeResult[R]:
    """Read *path* and decode the records it holds."""

    data = Path(path).read_bytes()
    return loads(data, record_type)


__all__ = ["dumps", "loads", "encode", "decode"]
