"""Merge entries gathered from several pages into one ordered, duplicate-free list."""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from whodied.models import Entry


def _sort_key(entry: Entry) -> datetime.date:
    # undated entries sort last in descending order
    return entry.date or datetime.date.min


def merge_entries(entries: Iterable[Entry]) -> list[Entry]:
    """
    Collapse entries sharing `(date, name)` and sort by date, newest first.

    A later entry replaces an earlier one with the same key, so a fuller
    monthly-digest mention supersedes a terse same-day mention. Each key keeps
    the position of its first occurrence, which decides the order of entries
    that share a date.
    """
    by_key: dict[tuple[datetime.date | None, str], Entry] = {}
    for entry in entries:
        by_key[entry.key] = entry
    return sorted(by_key.values(), key=_sort_key, reverse=True)
