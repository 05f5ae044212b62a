"""Command-line entry point for the crawler."""

from __future__ import annotations

import re
import sys
import time

from .colors import formatted_error_text
from .crawler import configure
from .normalize import URLParseError
from .report import print_report

DEFAULT_CONCURRENCY = 3
DEFAULT_MAX_PAGES = 5

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    return int(text)


def main(argv=None) -> int:
    """Run a crawl: URL [MAX_CONCURRENCY [MAX_PAGES]]."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("no website provided")
        return 1

    concurrency, max_pages = DEFAULT_CONCURRENCY, DEFAULT_MAX_PAGES
    try:
        if len(args) > 1:
            concurrency = _to_int(args[1])
        if len(args) > 2:
            max_pages = _to_int(args[2])
    except ValueError as exc:
        print(f"main::{formatted_error_text()}::could not convert to int > {exc}")
        return 1

    if len(args) > 3:
        print("too many args")
        return 1

    base_url = args[0]
    print(f"starting crawl of: \x1b[4;36m{base_url}\x1b[0m")

    try:
        crawler = configure(base_url, concurrency, max_pages)
    except (URLParseError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    start = time.perf_counter()
    pages = crawler.crawl()
    elapsed = time.perf_counter() - start
    print("DONE CRAWLING (in my skin)")
    print(f"\x1b[1;35mELAPSED TIME: {elapsed:.2f} SECONDS\x1b[0m")

    print_report(pages, crawler.base_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())