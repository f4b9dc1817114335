"""Behavioral tests for the whodied CLI."""

from __future__ import annotations

import datetime
import json

import pytest

from whodied.api import LoadResult, ParseResult
from whodied.cli import whodied as whodied_cli
from whodied.models import Entry, ExtractionReport
from whodied.sources import FetchResult


def _result(failures: list[FetchResult] | None = None) -> LoadResult:
    entries = [
        Entry(name="Jane Doe", age=54, info="Example Corp CEO", cause="cancer", date=datetime.date(2016, 3, 5)),
        Entry(name="John Roe", info="Example Corp CEO", date=datetime.date(2016, 3, 4)),
    ]
    report = ExtractionReport(
        source="Deaths_in_March_2016.html",
        candidates=3,
        entries=2,
        day_headings=2,
        skipped_items=["Mononym, 40"],
        unrecognized_headings=["Marchember 3"],
    )
    page = ParseResult(entries=entries, report=report, source=report.source, year=2016)
    return LoadResult(entries=entries, pages=[page], failures=failures or [])


def _failure() -> FetchResult:
    return FetchResult(
        ok=False,
        status="network_error",
        error="connection refused",
        source="https://en.wikipedia.org/wiki/Deaths_in_2016",
        final_url=None,
        html="",
        bytes_read=0,
        method="http",
    )


def test_main_prints_text_lines(monkeypatch, capsys) -> None:
    seen: dict = {}

    def fake_load(selectors, timeout):
        seen["selectors"] = selectors
        seen["timeout"] = timeout
        return _result()

    monkeypatch.setattr(whodied_cli, "load", fake_load)

    with pytest.raises(SystemExit) as exc:
        whodied_cli.main(["3/2016", "--timeout", "5"])

    assert exc.value.code == 0
    assert seen == {"selectors": ["3/2016"], "timeout": 5.0}
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "2016-03-05: Jane Doe (54,cancer): Example Corp CEO",
        "2016-03-04: John Roe (): Example Corp CEO",
    ]


def test_main_json_output(monkeypatch, capsys) -> None:
    monkeypatch.setattr(whodied_cli, "load", lambda selectors, timeout: _result())

    with pytest.raises(SystemExit) as exc:
        whodied_cli.main(["--json"])

    assert exc.value.code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["entries"][0] == {
        "name": "Jane Doe",
        "info": "Example Corp CEO",
        "age": 54,
        "date": "2016-03-05",
        "cause": "cancer",
    }
    assert payload["sources"][0]["skipped_items"] == ["Mononym, 40"]


def test_main_reports_failures_and_exits_1(monkeypatch, capsys) -> None:
    monkeypatch.setattr(whodied_cli, "load", lambda selectors, timeout: _result([_failure()]))

    with pytest.raises(SystemExit) as exc:
        whodied_cli.main([])

    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "whodied: connection refused" in captured.err
    assert "Jane Doe" in captured.out


def test_main_invalid_selector_exits_1(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        whodied_cli.main(["13/2016"])

    assert exc.value.code == 1
    assert "month must be in 1..12" in capsys.readouterr().err


def test_main_report_flag_prints_summary(monkeypatch, capsys) -> None:
    monkeypatch.setattr(whodied_cli, "load", lambda selectors, timeout: _result())

    with pytest.raises(SystemExit):
        whodied_cli.main(["--report"])

    err = capsys.readouterr().err
    assert "Deaths_in_March_2016.html: 2 entries, 3 candidates, 1 skipped, 2 day headings" in err
    assert "unrecognized heading: Marchember 3" in err


def test_main_unknown_option_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        whodied_cli.main(["--bogus"])

    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err
