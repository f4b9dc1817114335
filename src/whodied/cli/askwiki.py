"""CLI entrypoint for printing the intro extract of a Wikipedia article."""

from __future__ import annotations

import argparse
import logging
import sys

from whodied.summary import (
    EXTRACT_STATUS_AMBIGUOUS,
    EXTRACT_STATUS_FETCH_ERROR,
    EXTRACT_STATUS_NOT_FOUND,
    format_extract,
    query_extracts,
)

PROG = "askwiki"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog=PROG, description="Retrieve a Wikipedia extract using the Wikipedia API")
    parser.add_argument("keywords", nargs="+", metavar="KEYWORD", help="Article title words")
    parser.add_argument("--cols", type=int, default=80, help="Maximum output columns (default: 80)")
    parser.add_argument("--indent", type=int, default=2, help="Spaces to indent extract text (default: 2)")
    parser.add_argument("--timeout", type=float, default=20.0, help="HTTP timeout in seconds (default: 20)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    extracts, status = query_extracts(*args.keywords, timeout=args.timeout)
    query = " ".join(args.keywords)

    if status == EXTRACT_STATUS_FETCH_ERROR:
        print(f"{PROG}: request failed for `{query}'", file=sys.stderr)
        raise SystemExit(1)
    if status == EXTRACT_STATUS_NOT_FOUND:
        print(f"{PROG}: no match for `{query}'", file=sys.stderr)
        raise SystemExit(1)
    if status == EXTRACT_STATUS_AMBIGUOUS:
        print(f"{PROG}: ambiguous response for `{extracts[0].title}'", file=sys.stderr)
        raise SystemExit(1)

    print("\n".join(format_extract(e, cols=args.cols, indent=args.indent) for e in extracts), end="")
    raise SystemExit(0)


if __name__ == "__main__":
    main()
