"""Resolve date selectors to Wikipedia pages and load page HTML."""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

from whodied.dates import month_name

logger = logging.getLogger(__name__)

WIKI_BASE_URL = "https://en.wikipedia.org/wiki/"
USER_AGENT = "whodied/0.1 (notable deaths scraper)"
DEFAULT_TIMEOUT = 30.0

SELECTOR_RE = re.compile(r"^(\d+)(/(\d*))?$")

FETCH_STATUS_OK = "ok"
FETCH_STATUS_NOT_FOUND = "not_found"
FETCH_STATUS_HTTP_ERROR = "http_error"
FETCH_STATUS_NETWORK_ERROR = "network_error"
FETCH_STATUS_READ_ERROR = "read_error"


@dataclass
class FetchResult:
    """Outcome of loading one source page."""

    ok: bool
    status: str
    error: str | None
    source: str
    final_url: str | None
    html: str
    bytes_read: int
    method: str


def year_page_url(year: int, base_url: str = WIKI_BASE_URL) -> str:
    return f"{base_url}Deaths_in_{year}"


def month_page_url(year: int, month: int, base_url: str = WIKI_BASE_URL) -> str:
    return f"{base_url}Deaths_in_{month_name(month)}_{year}"


def resolve_source(
    selector: str,
    today: datetime.date | None = None,
    base_url: str = WIKI_BASE_URL,
) -> str:
    """
    Turn a command-line selector into a URL or path.

    - `""` -> this year's `Deaths_in_<YYYY>` page
    - `"3/2016"`, `"3/16"` -> `Deaths_in_March_2016`
    - `"2016"`, `"16"` -> `Deaths_in_January_2016`
    - anything else (URL or file path) is returned unchanged

    Two-digit years are taken as 20YY. Raises ValueError for an invalid month.
    """
    if not selector:
        today = today or datetime.date.today()
        return year_page_url(today.year, base_url)

    m = SELECTOR_RE.match(selector)
    if not m:
        return selector

    if m.group(3):
        month = int(m.group(1))
        year = int(m.group(3))
    else:
        month = 1
        year = int(m.group(1))
    if year < 100:
        year += 2000
    return month_page_url(year, month, base_url)


def is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def fetch_source(source: str, timeout: float = DEFAULT_TIMEOUT) -> FetchResult:
    """Load HTML over HTTP(S) or from a local file; failures are reported, not raised."""
    if is_remote(source):
        return _fetch_url(source, timeout)
    return _read_file(source)


def _fetch_url(url: str, timeout: float) -> FetchResult:
    logger.info("Fetching %s", url)
    try:
        response = requests.get(
            url,
            timeout=timeout,
            allow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )
    except requests.RequestException as e:
        logger.warning("Request failed for %s: %s", url, e)
        return FetchResult(
            ok=False,
            status=FETCH_STATUS_NETWORK_ERROR,
            error=str(e),
            source=url,
            final_url=None,
            html="",
            bytes_read=0,
            method="http",
        )

    if response.status_code == 404:
        return FetchResult(
            ok=False,
            status=FETCH_STATUS_NOT_FOUND,
            error=f"HTTP 404 for {url}",
            source=url,
            final_url=response.url,
            html="",
            bytes_read=0,
            method="http",
        )
    if response.status_code >= 400:
        logger.warning("HTTP %d for %s", response.status_code, url)
        return FetchResult(
            ok=False,
            status=FETCH_STATUS_HTTP_ERROR,
            error=f"HTTP {response.status_code} for {url}",
            source=url,
            final_url=response.url,
            html="",
            bytes_read=0,
            method="http",
        )

    html = response.text
    return FetchResult(
        ok=True,
        status=FETCH_STATUS_OK,
        error=None,
        source=url,
        final_url=response.url,
        html=html,
        bytes_read=len(html),
        method="http",
    )


def _read_file(source: str) -> FetchResult:
    path = Path(source)
    if not path.exists():
        return FetchResult(
            ok=False,
            status=FETCH_STATUS_NOT_FOUND,
            error=f"File not found: {path}",
            source=source,
            final_url=None,
            html="",
            bytes_read=0,
            method="file",
        )
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return FetchResult(
            ok=False,
            status=FETCH_STATUS_READ_ERROR,
            error=str(e),
            source=source,
            final_url=None,
            html="",
            bytes_read=0,
            method="file",
        )
    return FetchResult(
        ok=True,
        status=FETCH_STATUS_OK,
        error=None,
        source=source,
        final_url=None,
        html=html,
        bytes_read=len(html),
        method="file",
    )
