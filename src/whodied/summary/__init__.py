"""Helpers for Wikipedia article extracts."""

from whodied.summary.wiki import (
    EXTRACT_STATUS_AMBIGUOUS,
    EXTRACT_STATUS_FETCH_ERROR,
    EXTRACT_STATUS_NOT_FOUND,
    EXTRACT_STATUS_OK,
    WikiExtract,
    format_extract,
    parse_extracts,
    query_extracts,
)

__all__ = [
    "WikiExtract",
    "query_extracts",
    "parse_extracts",
    "format_extract",
    "EXTRACT_STATUS_OK",
    "EXTRACT_STATUS_NOT_FOUND",
    "EXTRACT_STATUS_AMBIGUOUS",
    "EXTRACT_STATUS_FETCH_ERROR",
]
