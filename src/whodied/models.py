"""Core data models for extracted death entries and per-page extraction reports."""

import datetime
from dataclasses import MISSING, dataclass, field
from typing import Any, Optional


def schema_field(
    description: str,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    json_schema: dict[str, Any] | None = None,
) -> Any:
    """Create a dataclass field with reusable JSON Schema metadata."""

    metadata: dict[str, Any] = {"description": description}
    if json_schema is not None:
        metadata["json_schema"] = json_schema

    kwargs: dict[str, Any] = {"metadata": metadata}
    if default is not MISSING:
        kwargs["default"] = default
    if default_factory is not MISSING:
        kwargs["default_factory"] = default_factory
    return field(**kwargs)


@dataclass(frozen=True)
class Entry:
    """One notable death extracted from a single list item."""

    name: str = schema_field("Full name of the deceased.", json_schema={"minLength": 1})
    info: str = schema_field(
        "Short occupation/background text, e.g. `American actor`.",
        json_schema={"minLength": 1},
    )
    age: Optional[int] = schema_field(
        default=None,
        description="Age at time of death; null when the item carried no numeric age.",
        json_schema={"type": ["integer", "null"], "minimum": 0},
    )
    date: Optional[datetime.date] = schema_field(
        default=None,
        description="Date of death taken from the closest preceding day heading.",
    )
    cause: Optional[str] = schema_field(
        default=None,
        description="Cause of death when the item ends with a distinct clause.",
    )

    @property
    def key(self) -> tuple[Optional[datetime.date], str]:
        return (self.date, self.name)

    def __str__(self) -> str:
        return format_entry(self)


def format_entry(entry: Entry) -> str:
    """Render an entry as `<date>: <name> (<age>[,<cause>]): <info>`."""
    when = entry.date.isoformat() if entry.date else ""
    age = "" if entry.age is None else str(entry.age)
    cause = "" if entry.cause is None else f",{entry.cause}"
    return f"{when}: {entry.name} ({age}{cause}): {entry.info}"


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """JSON-ready mapping of an entry (ISO date string)."""
    return {
        "name": entry.name,
        "info": entry.info,
        "age": entry.age,
        "date": entry.date.isoformat() if entry.date else None,
        "cause": entry.cause,
    }


@dataclass
class ExtractionReport:
    """Diagnostics collected while traversing one source page."""

    source: str = schema_field("Source URL or path the page was read from.")
    anchors_seen: int = schema_field(default=0, description="Number of `a[title]` nodes visited.")
    day_headings: int = schema_field(default=0, description="Day headings that set the current date.")
    month_headings: int = schema_field(default=0, description="Section headings that set the year.")
    candidates: int = schema_field(default=0, description="List items considered for extraction.")
    entries: int = schema_field(default=0, description="Entries emitted for this page.")
    skipped_items: list[str] = schema_field(
        default_factory=list,
        description="Text of candidate list items that could not be parsed into an entry.",
    )
    unrecognized_headings: list[str] = schema_field(
        default_factory=list,
        description="Titles of day headings that did not resolve to a calendar date.",
    )

    def is_clean(self) -> bool:
        return not self.skipped_items and not self.unrecognized_headings
