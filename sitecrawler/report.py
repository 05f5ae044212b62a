"""Crawl report formatting."""

from __future__ import annotations

from collections.abc import Mapping

_RULE = "============================="


def format_report(pages: Mapping[str, int], base_url: str) -> str:
    """Return the crawl report, pages ordered by descending link count."""
    lines = [_RULE, f"  REPORT for {base_url}", _RULE]
    for url, count in sorted(pages.items(), key=lambda item: item[1], reverse=True):
        lines.append(f"Found \x1b[33m{count}\x1b[0m internal links to \x1b[4;34m{url}\x1b[0m")
    return "\n".join(lines) + "\n"


def print_report(pages: Mapping[str, int], base_url: str) -> None:
    """Print the crawl report to standard output."""
    print(format_report(pages, base_url), end="")