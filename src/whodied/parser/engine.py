"""Parser engine that walks a deaths page and collects entries in document order."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup

from whodied.dates import year_from_source
from whodied.models import Entry, ExtractionReport
from whodied.parser.extract import extract_entry, is_candidate
from whodied.parser.nodes import PARENT_DAY_HEADING, PARENT_SECTION_HEADING, AnchorNode, iter_anchor_nodes
from whodied.parser.state import DateContext, advance, has_day_number, is_heading

logger = logging.getLogger(__name__)


class DeathsParser:
    """Parser for Wikipedia "Deaths in <month> <year>" and "Deaths in <year>" pages."""

    def __init__(self, source_file: str, year: int | None = None):
        self.source_file = source_file
        self.year = year if year is not None else year_from_source(source_file)
        self._reset()

    def _reset(self) -> None:
        self.entries: list[Entry] = []
        self.report = ExtractionReport(source=self.source_file)
        self.context = DateContext.start(self.year)

    def parse(self, html_content: str) -> list[Entry]:
        self._reset()
        soup = BeautifulSoup(html_content, "lxml")
        self.parse_nodes(iter_anchor_nodes(soup))
        logger.debug(
            "%s: %d entries from %d candidates",
            self.source_file,
            self.report.entries,
            self.report.candidates,
        )
        return self.entries

    def parse_nodes(self, nodes: Iterable[AnchorNode]) -> list[Entry]:
        for node in nodes:
            self._visit(node)
        return self.entries

    def _visit(self, node: AnchorNode) -> None:
        self.report.anchors_seen += 1
        if is_heading(node):
            self._visit_heading(node)
            return
        if not is_candidate(node):
            return

        self.report.candidates += 1
        entry = extract_entry(node, self.context)
        if entry is None:
            text = " ".join(node.text.split())
            logger.debug("Skipping unparseable item: %r", text)
            self.report.skipped_items.append(text)
            return
        self.entries.append(entry)
        self.report.entries += 1

    def _visit_heading(self, node: AnchorNode) -> None:
        updated = advance(self.context, node)
        if node.parent_kind == PARENT_DAY_HEADING:
            if updated is not self.context:
                self.report.day_headings += 1
            elif has_day_number(node.title):
                self.report.unrecognized_headings.append(node.title)
        elif node.parent_kind == PARENT_SECTION_HEADING and updated is not self.context:
            self.report.month_headings += 1
        self.context = updated
