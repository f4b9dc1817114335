"""Look up the introductory extract of Wikipedia articles."""

from __future__ import annotations

import logging
import re
import textwrap
from dataclasses import dataclass

import requests
from bs4 import BeautifulSoup

from whodied.sources import USER_AGENT

logger = logging.getLogger(__name__)

WIKI_API_URL = "https://en.wikipedia.org/w/api.php"

EXTRACT_STATUS_OK = "ok"
EXTRACT_STATUS_NOT_FOUND = "not_found"
EXTRACT_STATUS_AMBIGUOUS = "ambiguous"
EXTRACT_STATUS_FETCH_ERROR = "fetch_error"

_AMBIGUOUS_RE = re.compile(r"(may|can) refer to:$", flags=re.MULTILINE)


@dataclass
class WikiExtract:
    """Intro text of one article; `extract` is None for disambiguation pages."""

    title: str
    extract: str | None


def _extract_text(html: str) -> str:
    soup = BeautifulSoup(html or "", "lxml")
    body = soup.body
    return (body.get_text() if body else soup.get_text()).strip()


def parse_extracts(payload: dict) -> list[WikiExtract]:
    """Build extracts from a MediaWiki `prop=extracts` JSON response."""
    pages = (payload.get("query") or {}).get("pages") or {}
    extracts: list[WikiExtract] = []
    for page in pages.values():
        if page.get("extract") is None:
            continue
        text = _extract_text(page["extract"])
        if _AMBIGUOUS_RE.search(text):
            text = None
        extracts.append(WikiExtract(title=page.get("title", ""), extract=text))
    return extracts


def query_extracts(*keywords: str, timeout: float = 20.0) -> tuple[list[WikiExtract], str]:
    """Query Wikipedia for the article named by `keywords`."""
    params = {
        "action": "query",
        "format": "json",
        "redirects": "1",
        "prop": "extracts",
        "exintro": "",
        "titles": " ".join(" ".join(keywords).split()),
    }
    try:
        response = requests.get(
            WIKI_API_URL,
            params=params,
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Extract query failed: %s", e)
        return [], EXTRACT_STATUS_FETCH_ERROR

    extracts = parse_extracts(payload)
    if not extracts:
        return [], EXTRACT_STATUS_NOT_FOUND
    if extracts[0].extract is None:
        return extracts, EXTRACT_STATUS_AMBIGUOUS
    return extracts, EXTRACT_STATUS_OK


def format_extract(extract: WikiExtract, cols: int = 80, indent: int = 2) -> str:
    """Title line followed by each paragraph of the extract wrapped to `cols`."""
    prefix = " " * indent
    lines = [extract.title]
    for paragraph in (extract.extract or "").split("\n"):
        if not paragraph.strip():
            continue
        lines.extend(
            textwrap.wrap(
                paragraph.strip(),
                width=cols,
                initial_indent=prefix,
                subsequent_indent=prefix,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return "\n".join(lines) + "\n"
