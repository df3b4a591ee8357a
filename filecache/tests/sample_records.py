from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Item:
    """Minimal record: an integer id and a name, no separator escaping."""

    id: int
    name: str

    def to_record(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_record(cls, value: Any) -> "Item | None":
        if not isinstance(value, dict):
            return None
        item_id = value.get("id")
        name = value.get("name")
        if not isinstance(item_id, int) or isinstance(item_id, bool) or not isinstance(name, str):
            return None
        return cls(item_id, name)

    @classmethod
    def field_names(cls) -> list[str]:
        return ["id", "name"]

    def to_line(self, separator: str) -> str:
        return f"{self.id}{separator}{self.name}"

    @classmethod
    def from_line(cls, line: str, separator: str) -> "Item | None":
        parts = line.split(separator)
        if len(parts) != 2:
            return None
        return cls(int(parts[0]), parts[1])
