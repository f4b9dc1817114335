"""Tests for merging entries across pages."""

from __future__ import annotations

import datetime

from whodied.models import Entry
from whodied.parser.merge import merge_entries

D1 = datetime.date(2016, 3, 1)
D2 = datetime.date(2016, 3, 2)
D3 = datetime.date(2016, 3, 3)


def test_later_duplicate_wins() -> None:
    terse = Entry(name="Jane Doe", info="CEO", date=D2)
    fuller = Entry(name="Jane Doe", info="Example Corp CEO", age=54, cause="cancer", date=D2)

    merged = merge_entries([terse, fuller])

    assert merged == [fuller]


def test_same_name_on_different_dates_is_kept() -> None:
    a = Entry(name="Jane Doe", info="CEO", date=D1)
    b = Entry(name="Jane Doe", info="CEO", date=D2)
    assert merge_entries([a, b]) == [b, a]


def test_sorted_newest_first() -> None:
    entries = [
        Entry(name="A", info="x", date=D1),
        Entry(name="B", info="x", date=D3),
        Entry(name="C", info="x", date=D2),
    ]
    assert [e.name for e in merge_entries(entries)] == ["B", "C", "A"]


def test_same_date_keeps_first_seen_order() -> None:
    entries = [
        Entry(name="A", info="x", date=D1),
        Entry(name="B", info="x", date=D1),
        Entry(name="A", info="y", date=D1),
    ]
    merged = merge_entries(entries)
    assert [(e.name, e.info) for e in merged] == [("A", "y"), ("B", "x")]


def test_undated_entries_go_last() -> None:
    entries = [
        Entry(name="Undated", info="x"),
        Entry(name="A", info="x", date=D1),
        Entry(name="Undated too", info="x"),
        Entry(name="B", info="x", date=D2),
    ]
    assert [e.name for e in merge_entries(entries)] == ["B", "A", "Undated", "Undated too"]


def test_merge_is_deterministic() -> None:
    entries = [
        Entry(name="A", info="x", date=D2),
        Entry(name="B", info="x", date=D2),
        Entry(name="C", info="x"),
        Entry(name="A", info="z", date=D2),
    ]
    assert merge_entries(entries) == merge_entries(list(entries))
    assert merge_entries(merge_entries(entries)) == merge_entries(entries)


def test_empty_input() -> None:
    assert merge_entries([]) == []
