"""High-level library API for parsing and merging deaths pages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from whodied.models import Entry, ExtractionReport
from whodied.parser.engine import DeathsParser
from whodied.parser.merge import merge_entries
from whodied.sources import DEFAULT_TIMEOUT, FetchResult, fetch_source, resolve_source


@dataclass
class ParseResult:
    """Entries from one page in document order, before merging."""

    entries: list[Entry]
    report: ExtractionReport
    source: str
    year: int


@dataclass
class LoadResult:
    """Merged entries for a whole query plus per-page outcomes."""

    entries: list[Entry]
    pages: list[ParseResult] = field(default_factory=list)
    failures: list[FetchResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def parse_html(html_content: str, source: str, *, year: int | None = None) -> ParseResult:
    """Parse HTML content of one deaths page."""
    parser = DeathsParser(source_file=source, year=year)
    entries = parser.parse(html_content)
    return ParseResult(
        entries=list(entries),
        report=parser.report,
        source=source,
        year=parser.year,
    )


def parse_file(input_path: str | Path, *, year: int | None = None) -> ParseResult:
    """Parse a saved deaths page from disk."""
    path = Path(input_path)
    html_content = path.read_text(encoding="utf-8")
    return parse_html(html_content, source=str(path), year=year)


def load(selectors: Iterable[str] = (), *, timeout: float = DEFAULT_TIMEOUT) -> LoadResult:
    """
    Resolve, fetch and parse each selector in order, then merge the results.

    An empty selector list loads this year's page. Raises ValueError for a
    selector with an invalid month.
    """
    sources = [resolve_source(s) for s in selectors] or [resolve_source("")]

    pages: list[ParseResult] = []
    failures: list[FetchResult] = []
    collected: list[Entry] = []
    for source in sources:
        fetched = fetch_source(source, timeout=timeout)
        if not fetched.ok:
            failures.append(fetched)
            continue
        page = parse_html(fetched.html, source=source)
        pages.append(page)
        collected.extend(page.entries)

    return LoadResult(entries=merge_entries(collected), pages=pages, failures=failures)
