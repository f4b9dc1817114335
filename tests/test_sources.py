"""Tests for selector resolution and page loading with mocked HTTP."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest
import requests

from whodied import sources
from whodied.dates import year_from_source


class _FakeResponse:
    def __init__(self, text: str, url: str, status_code: int = 200):
        self.text = text
        self.url = url
        self.status_code = status_code


def test_resolve_source_empty_selector_uses_this_year() -> None:
    today = datetime.date(2016, 7, 1)
    assert sources.resolve_source("", today=today) == "https://en.wikipedia.org/wiki/Deaths_in_2016"


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        ("3/2016", "Deaths_in_March_2016"),
        ("3/16", "Deaths_in_March_2016"),
        ("12/1999", "Deaths_in_December_1999"),
        ("2016", "Deaths_in_January_2016"),
        ("16", "Deaths_in_January_2016"),
    ],
)
def test_resolve_source_month_year_selectors(selector: str, expected: str) -> None:
    assert sources.resolve_source(selector) == sources.WIKI_BASE_URL + expected


def test_resolve_source_passes_through_urls_and_paths() -> None:
    url = "https://en.wikipedia.org/wiki/Deaths_in_May_2015"
    assert sources.resolve_source(url) == url
    assert sources.resolve_source("saved/page.html") == "saved/page.html"


def test_resolve_source_rejects_invalid_month() -> None:
    with pytest.raises(ValueError):
        sources.resolve_source("13/2016")


def test_year_from_source() -> None:
    assert year_from_source("https://en.wikipedia.org/wiki/Deaths_in_March_2016") == 2016
    assert year_from_source("https://en.wikipedia.org/wiki/Deaths_in_2014") == 2014
    assert year_from_source("downloads/deaths-2012.html") == 2012
    assert year_from_source("downloads/page.html", default=2001) == 2001
    assert year_from_source("page20160.html", default=2001) == 2001
    assert year_from_source("page.html") == datetime.date.today().year


def test_fetch_source_http_success(monkeypatch) -> None:
    calls: list[dict] = []

    def fake_get(url, **kwargs):
        calls.append({"url": url, **kwargs})
        return _FakeResponse("<html>ok</html>", url)

    monkeypatch.setattr(sources.requests, "get", fake_get)
    result = sources.fetch_source("https://en.wikipedia.org/wiki/Deaths_in_2016", timeout=5)

    assert result.ok is True
    assert result.status == "ok"
    assert result.html == "<html>ok</html>"
    assert result.method == "http"
    assert calls[0]["timeout"] == 5
    assert "User-Agent" in calls[0]["headers"]


def test_fetch_source_network_error(monkeypatch) -> None:
    def fake_get(url, **kwargs):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(sources.requests, "get", fake_get)
    result = sources.fetch_source("https://en.wikipedia.org/wiki/Deaths_in_2016")

    assert result.ok is False
    assert result.status == "network_error"
    assert "boom" in (result.error or "")


@pytest.mark.parametrize(("code", "status"), [(404, "not_found"), (503, "http_error")])
def test_fetch_source_http_status_errors(monkeypatch, code: int, status: str) -> None:
    monkeypatch.setattr(sources.requests, "get", lambda url, **_kwargs: _FakeResponse("", url, code))
    result = sources.fetch_source("https://en.wikipedia.org/wiki/Deaths_in_2099")
    assert result.ok is False
    assert result.status == status


def test_fetch_source_reads_local_file(tmp_path: Path) -> None:
    path = tmp_path / "page.html"
    path.write_text("<html>local</html>", encoding="utf-8")

    result = sources.fetch_source(str(path))
    assert result.ok is True
    assert result.method == "file"
    assert result.html == "<html>local</html>"


def test_fetch_source_missing_file(tmp_path: Path) -> None:
    result = sources.fetch_source(str(tmp_path / "missing.html"))
    assert result.ok is False
    assert result.status == "not_found"
