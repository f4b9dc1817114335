"""Text helpers used to clean up the prose of death list items."""

import re

PARENTHETICAL_RE = re.compile(r"\([^()]+\)")
PARENTHETICAL_ASIDE_RE = re.compile(r"\s*\([^()]*\)\s*")
REFERENCE_MARKER_RE = re.compile(r"\s*\[\d+\]\s*")
TRAILING_PERIOD_RE = re.compile(r"\s*\.\s*$")
FIELD_SEPARATOR_RE = re.compile(r"\s*,\s*")


def mask_parenthetical_commas(text: str) -> str:
    """Replace commas inside `(...)` groups with semicolons so a comma split keeps asides whole."""
    return PARENTHETICAL_RE.sub(lambda m: m.group(0).replace(",", ";"), text)


def strip_reference_markers(text: str) -> str:
    """Remove citation markers such as `[12]` together with adjacent whitespace."""
    return REFERENCE_MARKER_RE.sub("", text)


def strip_trailing_period(text: str) -> str:
    return TRAILING_PERIOD_RE.sub("", text)


def strip_parentheticals(text: str) -> str:
    """Replace `(...)` asides with a single space."""
    return PARENTHETICAL_ASIDE_RE.sub(" ", text)


def normalize_text(text: str) -> str:
    """Normalize whitespace and trim."""
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def split_fields(text: str) -> list[str]:
    """
    Split item text on commas (with optional surrounding whitespace).

    Each field is stripped and trailing empty fields are dropped, so
    `"a , b, "` yields `["a", "b"]`.
    """
    tokens = [t.strip() for t in FIELD_SEPARATOR_RE.split(text)]
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def clean_field(text: str) -> str:
    """Strip asides and a trailing period, then collapse whitespace."""
    return normalize_text(strip_trailing_period(strip_parentheticals(text)))
