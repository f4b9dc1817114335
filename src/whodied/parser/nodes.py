"""Turn a parsed deaths page into the ordered anchor nodes the extractor consumes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

PARENT_DAY_HEADING = "span-in-h3"
PARENT_SECTION_HEADING = "span-in-h2"
PARENT_LIST_ITEM = "li"
PARENT_OTHER = "other"


@dataclass(frozen=True)
class AnchorNode:
    """An `a[title]` element reduced to what traversal needs."""

    title: str
    parent_kind: str
    is_first_child: bool = False
    text: str = ""


def classify_parent(anchor: Tag) -> str:
    parent = anchor.parent
    if parent is None:
        return PARENT_OTHER
    if parent.name == "span":
        grandparent = parent.parent
        if grandparent is not None and grandparent.name == "h3":
            return PARENT_DAY_HEADING
        if grandparent is not None and grandparent.name == "h2":
            return PARENT_SECTION_HEADING
        return PARENT_OTHER
    if parent.name == "li":
        return PARENT_LIST_ITEM
    return PARENT_OTHER


def is_first_child(anchor: Tag) -> bool:
    parent = anchor.parent
    if parent is None or not parent.contents:
        return False
    return parent.contents[0] is anchor


def to_anchor_node(anchor: Tag) -> AnchorNode:
    kind = classify_parent(anchor)
    first = kind == PARENT_LIST_ITEM and is_first_child(anchor)
    # text is only read for candidates
    text = anchor.parent.get_text() if first else ""
    return AnchorNode(
        title=str(anchor.get("title", "")),
        parent_kind=kind,
        is_first_child=first,
        text=text,
    )


def iter_anchor_nodes(soup: BeautifulSoup) -> Iterator[AnchorNode]:
    """Yield every titled anchor in document order."""
    for anchor in soup.select("a[title]"):
        yield to_anchor_node(anchor)
