from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from filecache import FileCache, FileFormat, TodoItem
from filecache.codecs import csv_codec

_CREATED = datetime(2024, 7, 12, 9, 30, tzinfo=timezone.utc)
_AEST = timezone(timedelta(hours=10))


def _sample(**overrides) -> TodoItem:
    values = {
        "id": "a1",
        "text": "Buy milk",
        "importance": "important",
        "deadline": datetime(2024, 7, 20, 18, 0, tzinfo=_AEST),
        "is_done": False,
        "created_at": _CREATED,
        "modified_at": None,
    }
    values.update(overrides)
    return TodoItem(**values)


@pytest.mark.parametrize("fmt", list(FileFormat))
def test_roundtrip_through_cache(documents, fmt):
    cache = FileCache(TodoItem, documents_dir=documents)
    first = _sample()
    second = _sample(
        id="b2",
        text='Call "Bob"; then email',
        importance="low",
        deadline=None,
        is_done=True,
        modified_at=_CREATED + timedelta(hours=1),
    )
    cache.add(first)
    cache.add(second)
    cache.save(format=fmt)
    assert FileCache(TodoItem, documents_dir=documents).load(format=fmt) == [first, second]


def test_csv_header_uses_field_names():
    assert csv_codec.header(TodoItem) == (
        "id;text;importance;deadline;is_done;created_at;modified_at"
    )


def test_to_line_quotes_separator():
    line = _sample(text="a;b").to_line(";")
    assert '"a;b"' in line
    assert TodoItem.from_line(line, ";") == _sample(text="a;b")


def test_newline_in_text_does_not_survive_csv(documents):
    cache = FileCache(TodoItem, documents_dir=documents)
    item = _sample(text="line one\nline two")
    cache.add(item)
    cache.save(format="csv")
    assert item not in cache.load(format="csv")


def test_to_record_omits_unset_dates():
    record = _sample(deadline=None).to_record()
    assert "deadline" not in record
    assert "modified_at" not in record
    assert record["created_at"] == _CREATED.isoformat()


def test_from_record_defaults_importance():
    record = _sample().to_record()
    del record["importance"]
    assert TodoItem.from_record(record).importance == "basic"


@pytest.mark.parametrize(
    "value",
    [
        "not a mapping",
        {"text": "no id", "created_at": _CREATED.isoformat()},
        {"id": "x", "text": "no created_at"},
        {"id": "x", "text": "t", "created_at": "yesterday"},
        {"id": "x", "text": "t", "created_at": "2024-07-12T09:30:00"},
        {"id": "x", "text": "t", "created_at": _CREATED.isoformat(), "importance": "urgent"},
        {"id": "x", "text": "t", "created_at": _CREATED.isoformat(), "is_done": "maybe"},
    ],
)
def test_from_record_rejects_bad_input(value):
    assert TodoItem.from_record(value) is None


@pytest.mark.parametrize(
    "line",
    [
        "",
        "a1;text",
        'a1;"unterminated;basic;;false;2024-07-12T09:30:00+00:00;',
        ";text;basic;;false;2024-07-12T09:30:00+00:00;",
    ],
)
def test_from_line_rejects_bad_input(line):
    assert TodoItem.from_line(line, ";") is None


def test_constructor_validates():
    with pytest.raises(ValueError):
        TodoItem(text="x", created_at=datetime(2024, 1, 1))
    with pytest.raises(ValueError):
        TodoItem(text="x", importance="urgent")


def test_defaults_generate_id_and_timestamp():
    item = TodoItem(text="x")
    assert item.id
    assert item.created_at.tzinfo is not None
    assert item.importance == "basic"
    assert item != TodoItem(text="x")


def test_carriage_return_in_text_survives_csv(documents):
    cache = FileCache(TodoItem, documents_dir=documents)
    item = _sample(text="first\rsecond")
    cache.add(item)
    cache.save(format="csv")
    assert cache.load(format="csv") == [item]
