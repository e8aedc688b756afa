from __future__ import annotations

import argparse
import json
import logging
import sys
from itertools import islice

from .errors import MalformedLineError, TransportError
from .deliver.clients import get_client
from .settings import get_settings


def cmd_search(args: argparse.Namespace) -> int:
    if not args.term.strip():
        print("Search term must not be empty.", file=sys.stderr)
        return 2
    settings = get_settings(
        base_url=args.base_url,
        request_timeout=args.timeout,
    )
    try:
        with get_client(settings) as client:
            outcomes = client.search(args.term)
    except TransportError as e:
        print(str(e), file=sys.stderr)
        return 1

    records = _records(outcomes, report_errors=not args.skip_errors)
    if args.max_results and args.max_results > 0:
        records = islice(records, args.max_results)
    for r in records:
        print(json.dumps(r.to_dict(), ensure_ascii=False))
    return 0


def _records(outcomes, report_errors: bool = True):
    for outcome in outcomes:
        if isinstance(outcome, MalformedLineError):
            if report_errors:
                print(str(outcome), file=sys.stderr)
            continue
        yield outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sunxdcc", description="Search SunXDCC for files offered by XDCC bots")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and parse problems to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Search SunXDCC and print results as JSON lines")
    p_search.add_argument("term", help="Search term")
    p_search.add_argument("--max-results", type=int, default=0, help="Stop after this many results (0: no limit)")
    p_search.add_argument("--skip-errors", action="store_true", help="Do not report malformed response lines")
    p_search.add_argument("--timeout", type=float, help="Request timeout in seconds")
    p_search.add_argument("--base-url", help="Search endpoint override")
    p_search.set_defaults(func=cmd_search)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
