"""Todo item record stored by the command line application."""
from __future__ import annotations

import csv
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from io import StringIO
from typing import Any, Optional

from .records import Document

IMPORTANCE_LEVELS = ("low", "basic", "important")

_FIELD_NAMES = (
    "id",
    "text",
    "importance",
    "deadline",
    "is_done",
    "created_at",
    "modified_at",
)


def _ensure_aware(name: str, value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise ValueError(f"{name} must be timezone-aware")
    return value


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _format_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _parse_datetime(value: Any) -> datetime | None:
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise TypeError(f"Expected ISO timestamp, got {value!r}")
    return datetime.fromisoformat(value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalised = str(value).strip().lower()
    if normalised in {"true", "1", "yes"}:
        return True
    if normalised in {"false", "0", "no", ""}:
        return False
    raise ValueError(f"Invalid boolean: {value!r}")


@dataclass(slots=True)
class TodoItem:
    text: str
    importance: str = "basic"
    deadline: Optional[datetime] = None
    is_done: bool = False
    created_at: datetime = field(default_factory=_now)
    modified_at: Optional[datetime] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("TodoItem.id must not be empty")
        self.importance = self.importance.lower()
        if self.importance not in IMPORTANCE_LEVELS:
            raise ValueError(f"Unknown importance: {self.importance!r}")
        _ensure_aware("TodoItem.deadline", self.deadline)
        _ensure_aware("TodoItem.created_at", self.created_at)
        _ensure_aware("TodoItem.modified_at", self.modified_at)

    # --- structured view -------------------------------------------------
    def to_record(self) -> Document:
        record: dict[str, Document] = {
            "id": self.id,
            "text": self.text,
            "importance": self.importance,
            "is_done": self.is_done,
            "created_at": self.created_at.isoformat(),
        }
        if self.deadline is not None:
            record["deadline"] = self.deadline.isoformat()
        if self.modified_at is not None:
            record["modified_at"] = self.modified_at.isoformat()
        return record

    @classmethod
    def from_record(cls, value: Any) -> "TodoItem | None":
        if not isinstance(value, dict):
            return None
        item_id = value.get("id")
        text = value.get("text")
        created_at = value.get("created_at")
        if not isinstance(item_id, str) or not isinstance(text, str) or created_at is None:
            return None
        try:
            return cls(
                id=item_id,
                text=text,
                importance=str(value.get("importance", "basic")),
                deadline=_parse_datetime(value.get("deadline")),
                is_done=_parse_bool(value.get("is_done", False)),
                created_at=_parse_datetime(created_at),
                modified_at=_parse_datetime(value.get("modified_at")),
            )
        except (TypeError, ValueError):
            return None

    # --- delimited-text view ---------------------------------------------
    @classmethod
    def field_names(cls) -> list[str]:
        return list(_FIELD_NAMES)

    def to_line(self, separator: str) -> str:
        # Fields holding the separator, quotes or "\r" are quoted; "\n" is
        # quoted too but cannot survive the line-by-line file split.
        buffer = StringIO()
        writer = csv.writer(buffer, delimiter=separator, lineterminator="\r\n")
        writer.writerow(
            [
                _format_value(self.id),
                _format_value(self.text),
                _format_value(self.importance),
                _format_value(self.deadline),
                _format_value(self.is_done),
                _format_value(self.created_at),
                _format_value(self.modified_at),
            ]
        )
        return buffer.getvalue().removesuffix("\r\n")

    @classmethod
    def from_line(cls, line: str, separator: str) -> "TodoItem | None":
        try:
            rows = list(csv.reader([line], delimiter=separator, strict=True))
        except csv.Error:
            return None
        if len(rows) != 1 or len(rows[0]) != len(_FIELD_NAMES):
            return None
        values = dict(zip(_FIELD_NAMES, rows[0]))
        if not values["id"] or not values["created_at"]:
            return None
        try:
            return cls(
                id=values["id"],
                text=values["text"],
                importance=values["importance"] or "basic",
                deadline=_parse_datetime(values["deadline"]),
                is_done=_parse_bool(values["is_done"]),
                created_at=_parse_datetime(values["created_at"]),
                modified_at=_parse_datetime(values["modified_at"]),
            )
        except (TypeError, ValueError):
            return None


__all__ = ["TodoItem", "IMPORTANCE_LEVELS"]
