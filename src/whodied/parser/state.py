"""Date context threaded through the traversal of one deaths page."""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, replace

from whodied.dates import is_number, make_date
from whodied.parser.nodes import PARENT_DAY_HEADING, PARENT_SECTION_HEADING, AnchorNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateContext:
    """Current year and day established by the headings seen so far."""

    year: int
    current_date: datetime.date | None = None

    @classmethod
    def start(cls, year: int | None = None) -> DateContext:
        return cls(year=year if year is not None else datetime.date.today().year)


def has_day_number(title: str) -> bool:
    parts = title.split()
    return len(parts) >= 2 and is_number(parts[1])


def apply_day_heading(context: DateContext, title: str) -> DateContext:
    """`<h3><span><a title="March 5">` sets the current date to March 5 of the context year."""
    if not has_day_number(title):
        return context
    parts = title.split()
    month, day = parts[0], parts[1]
    new_date = make_date(context.year, month, int(day))
    if new_date is None:
        logger.debug("Ignoring day heading with unrecognized date: %r", title)
        return context
    return replace(context, current_date=new_date)


def apply_section_heading(context: DateContext, title: str) -> DateContext:
    """`<h2><span><a title="Deaths in January 2016">` sets the year, as does a bare `2016`; the day is untouched."""
    parts = title.split()
    if not parts or not is_number(parts[-1]):
        return context
    return replace(context, year=int(parts[-1]))


def advance(context: DateContext, node: AnchorNode) -> DateContext:
    """Return the context after visiting `node`; non-heading nodes leave it unchanged."""
    if node.parent_kind == PARENT_DAY_HEADING:
        return apply_day_heading(context, node.title)
    if node.parent_kind == PARENT_SECTION_HEADING:
        return apply_section_heading(context, node.title)
    return context


def is_heading(node: AnchorNode) -> bool:
    return node.parent_kind in (PARENT_DAY_HEADING, PARENT_SECTION_HEADING)
