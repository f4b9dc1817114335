"""CLI entrypoint for listing notable deaths from Wikipedia."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from whodied.api import LoadResult, load
from whodied.models import entry_to_dict, format_entry
from whodied.sources import DEFAULT_TIMEOUT

PROG = "whodied"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Scrape notable death entries from Wikipedia.",
        epilog="Selectors: MONTH/YEAR (e.g. 3/2016 or 3/16), YEAR, a page URL or a saved HTML file. "
        "Without arguments this year's page is used.",
    )
    parser.add_argument("sources", nargs="*", metavar="SOURCE", help="MONTH/YEAR, URI or FILE")
    parser.add_argument("--json", action="store_true", help="Print entries as JSON instead of text lines")
    parser.add_argument("--report", action="store_true", help="Print per-page extraction summaries to stderr")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _print_report(result: LoadResult) -> None:
    for page in result.pages:
        report = page.report
        print(
            f"{report.source}: {report.entries} entries, {report.candidates} candidates, "
            f"{len(report.skipped_items)} skipped, {report.day_headings} day headings",
            file=sys.stderr,
        )
        for title in report.unrecognized_headings:
            print(f"  unrecognized heading: {title}", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = load(args.sources, timeout=args.timeout)
    except ValueError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        raise SystemExit(1)

    for failure in result.failures:
        print(f"{PROG}: {failure.error}", file=sys.stderr)

    if args.json:
        payload = {
            "sources": [asdict(page.report) for page in result.pages],
            "entries": [entry_to_dict(entry) for entry in result.entries],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for entry in result.entries:
            print(format_entry(entry))

    if args.report:
        _print_report(result)

    raise SystemExit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
