"""Month-name and year helpers for heading titles and page names."""

import datetime
import re
from typing import Optional
from urllib.parse import unquote, urlparse

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DIGITS_RE = re.compile(r"[0-9]+")
PAGE_YEAR_RE = re.compile(r"(?<![0-9])([0-9]{4})$")


def is_number(token: Optional[str]) -> bool:
    return bool(token) and DIGITS_RE.fullmatch(token) is not None


def month_index(name: str) -> Optional[int]:
    """Return 1-12 for a full English month name, None when unrecognized."""
    try:
        return MONTH_NAMES.index(name) + 1
    except ValueError:
        return None


def month_name(index: int) -> str:
    if not 1 <= index <= 12:
        raise ValueError(f"month must be in 1..12, got {index}")
    return MONTH_NAMES[index - 1]


def make_date(year: int, month: str, day: int) -> Optional[datetime.date]:
    """Build a date from a month name, or None if the combination is not a real day."""
    index = month_index(month)
    if index is None:
        return None
    try:
        return datetime.date(year, index, day)
    except (ValueError, OverflowError):
        return None


def year_from_source(source: str, default: Optional[int] = None) -> int:
    """
    Infer the page year from a URL or path such as `Deaths_in_March_2016`
    or `deaths-2016.html`.

    Falls back to `default`, then to the current calendar year.
    """
    path = unquote(urlparse(source).path) if "://" in source else source
    stem = path.rstrip("/").rsplit("/", 1)[-1]
    stem = re.sub(r"\.\w+$", "", stem)
    m = PAGE_YEAR_RE.search(stem)
    if m:
        return int(m.group(1))
    if default is not None:
        return default
    return datetime.date.today().year
