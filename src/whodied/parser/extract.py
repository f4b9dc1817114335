"""Field extraction for a single death list item.

List items on the deaths pages come in two dominant shapes::

    Name, Age, Occupation, Cause.
    Name, Occupation, Cause.

The extractor tokenizes the item on commas and assigns fields by position,
shifting the occupation left when the second field is not a number.
Irregular phrasing is occasionally misclassified; items that cannot supply
both a name and an occupation are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from whodied.dates import is_number
from whodied.models import Entry
from whodied.parser.nodes import PARENT_LIST_ITEM, AnchorNode
from whodied.parser.state import DateContext
from whodied.text_utils import (
    clean_field,
    mask_parenthetical_commas,
    split_fields,
    strip_reference_markers,
    strip_trailing_period,
)


@dataclass(frozen=True)
class RawFields:
    """Positional fields of an item before normalization."""

    name: str
    age: Optional[int]
    info: str
    cause: Optional[str]


def is_candidate(node: AnchorNode) -> bool:
    """Only the leading anchor of a list item marks a death entry."""
    return node.parent_kind == PARENT_LIST_ITEM and node.is_first_child


def tokenize(text: str) -> list[str]:
    text = mask_parenthetical_commas(text)
    text = strip_reference_markers(text)
    text = strip_trailing_period(text)
    return split_fields(text)


def assign_fields(tokens: list[str]) -> RawFields | None:
    """Map tokens to name/age/info/cause, or None when the item is malformed."""
    if not tokens:
        return None
    name = tokens[0]
    age_token = tokens[1] if len(tokens) > 1 else None
    info = tokens[2] if len(tokens) > 2 else None
    cause = tokens[-1] if len(tokens) > 2 else None

    age: Optional[int] = None
    if age_token is not None and is_number(age_token):
        age = int(age_token)
    else:
        # no age: the occupation sits in the second slot
        info = age_token

    if age_token is None or info is None:
        return None
    return RawFields(name=name, age=age, info=info, cause=resolve_cause(cause, info))


def resolve_cause(cause: Optional[str], info: str) -> Optional[str]:
    """Drop a cause that is a parenthetical tail, repeats the info, or is blank."""
    if cause is None:
        return None
    cause = cause.strip()
    if not cause or cause.endswith(")") or cause == info:
        return None
    return cause


def build_entry(fields: RawFields, context: DateContext) -> Entry | None:
    name = clean_field(fields.name)
    info = clean_field(fields.info)
    if not name or not info:
        return None
    return Entry(
        name=name,
        info=info,
        age=fields.age,
        date=context.current_date,
        cause=fields.cause,
    )


def extract_text(text: str, context: DateContext) -> Entry | None:
    """Extract an entry from the full text of one list item."""
    fields = assign_fields(tokenize(text))
    if fields is None:
        return None
    return build_entry(fields, context)


def extract_entry(node: AnchorNode, context: DateContext) -> Entry | None:
    if not is_candidate(node):
        return None
    return extract_text(node.text, context)
