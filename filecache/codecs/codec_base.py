"""Shared pieces for the file codecs."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable

from ..records import R

LOGGER = logging.getLogger(__name__)

# Exceptions a record parser may raise for input it does not understand.
PARSE_ERRORS = (ValueError, TypeError, KeyError, IndexError)


@dataclass
class DecodeResult(Generic[R]):
    """Records decoded from a file plus the raw entries that were dropped."""

    objects: list[R] = field(default_factory=list)
    skipped: list[Any] = field(default_factory=list)


def parse_entries(
    entries: Iterable[Any],
    parse: Callable[[Any], R | None],
) -> DecodeResult[R]:
    """Run *parse* over *entries*, collecting the ones it rejects."""

    result: DecodeResult[R] = DecodeResult()
    for entry in entries:
        try:
            parsed = parse(entry)
        except PARSE_ERRORS as exc:
            LOGGER.debug("Dropping unparsable entry %r: %s", entry, exc)
            parsed = None
        if parsed is None:
            result.skipped.append(entry)
        else:
            result.objects.append(parsed)
    if result.skipped:
        LOGGER.debug("Skipped %d unparsable entries", len(result.skipped))
    return result


__all__ = ["DecodeResult", "PARSE_ERRORS", "parse_entries"]
