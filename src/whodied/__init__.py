"""Public package API for whodied."""

from whodied.api import LoadResult, ParseResult, load, parse_file, parse_html
from whodied.models import Entry, ExtractionReport, entry_to_dict, format_entry
from whodied.parser.engine import DeathsParser
from whodied.parser.merge import merge_entries
from whodied.sources import FetchResult, fetch_source, resolve_source
from whodied.summary import WikiExtract, format_extract, query_extracts
from whodied.text_utils import (
    mask_parenthetical_commas,
    normalize_text,
    split_fields,
    strip_parentheticals,
    strip_reference_markers,
    strip_trailing_period,
)

__all__ = [
    "DeathsParser",
    "Entry",
    "ExtractionReport",
    "parse_html",
    "parse_file",
    "load",
    "ParseResult",
    "LoadResult",
    "merge_entries",
    "format_entry",
    "entry_to_dict",
    "FetchResult",
    "fetch_source",
    "resolve_source",
    "WikiExtract",
    "query_extracts",
    "format_extract",
    "mask_parenthetical_commas",
    "strip_reference_markers",
    "strip_trailing_period",
    "strip_parentheticals",
    "normalize_text",
    "split_fields",
]
