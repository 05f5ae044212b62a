"""Concurrent same-domain web crawler."""

from __future__ import annotations

import threading
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait

from .colors import formatted_error_text
from .fetch import FetchError, get_html
from .links import get_urls_from_html
from .normalize import URLParseError, _split_url, normalize_url


class Crawler:
    """Crawls pages on the base URL's host, counting links to each page."""

    def __init__(self, base_url: str, max_concurrency: int, max_pages: int) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._base = _split_url(base_url)
        self.base_url = base_url
        self.max_concurrency = max_concurrency
        self.max_pages = max_pages
        self.pages: dict[str, int] = {}
        self._lock = threading.Lock()

    def add_page_visit(self, normalized_url: str) -> bool:
        """Record a visit; return True if this is the first one."""
        with self._lock:
            if normalized_url in self.pages:
                self.pages[normalized_url] += 1
                return False
            self.pages[normalized_url] = 1
            return True

    def over_page_limit(self) -> bool:
        with self._lock:
            return len(self.pages) >= self.max_pages

    def crawl_page(self, raw_current_url: str) -> list[str]:
        """Visit one page and return the links to crawl next."""
        if self.over_page_limit():
            return []

        err = formatted_error_text()
        print(f"\t....crawling \x1b[4;34m{raw_current_url}\x1b[0m")
        try:
            current = _split_url(raw_current_url)
        except URLParseError as exc:
            print(f"\tcrawlPage::{err}::Error trying to parse urls > {exc}")
            return []

        base_host, current_host = self._base.hostname(), current.hostname()
        if base_host != current_host:
            print(f"\t\tcrawlPage::{err}::Domains don't match > {base_host} != {current_host}")
            return []

        try:
            normalized = normalize_url(raw_current_url)
        except URLParseError as exc:
            print(f"\t\tcrawlPage::{err}::Error normalizing url > {exc}")
            return []

        if not self.add_page_visit(normalized):
            print(f"\t\t ● {normalized} - \x1b[33mVisited\x1b[0m")
            return []

        try:
            html_body = get_html(normalized)
        except FetchError as exc:
            print(f"\t\tcrawlPage::{err}::Could not get HTML > {exc}")
            return []

        try:
            return get_urls_from_html(html_body, self.base_url)
        except URLParseError as exc:
            print(f"\t\tcrawlPage::{err}::Could not build slice of url links > {exc}")
            return []

    def crawl(self) -> dict[str, int]:
        """Crawl from the base URL until no links remain; return page counts."""
        with ThreadPoolExecutor(max_workers=self.max_concurrency) as pool:
            pending = {pool.submit(self.crawl_page, self.base_url)}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    for link in future.result():
                        pending.add(pool.submit(self.crawl_page, link))
        with self._lock:
            return dict(self.pages)


def configure(raw_base_url: str, max_concurrency: int, max_pages: int) -> Crawler:
    """Create a crawler for raw_base_url."""
    try:
        return Crawler(raw_base_url, max_concurrency, max_pages)
    except URLParseError as exc:
        raise URLParseError(
            f"configure::{formatted_error_text()}:: couldn't parse url {raw_base_url}"
        ) from exc