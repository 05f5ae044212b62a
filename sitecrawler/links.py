"""Extracting links from HTML documents."""

from __future__ import annotations

from html.parser import HTMLParser
from urllib.parse import urljoin

from .colors import formatted_error_text
from .normalize import URLParseError, _split_url


class _AnchorCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.hrefs: list[str] = []

    def handle_starttag(self, tag, attrs):
        if tag == "a":
            self.hrefs.extend("" if value is None else value for key, value in attrs if key == "href")


def get_urls_from_html(html_body: str, base_url: str) -> list[str]:
    """Return every anchor href in html_body resolved against base_url."""
    try:
        _split_url(base_url)
    except URLParseError as exc:
        raise URLParseError(f"couldn't parse base URL: {exc}") from exc

    collector = _AnchorCollector()
    collector.feed(html_body)
    collector.close()

    urls = []
    for href in collector.hrefs:
        try:
            _split_url(href)
        except URLParseError as exc:
            print(f"traverseParsedHTML::{formatted_error_text()}::couldn't parse href '{href}': {exc}")
            continue
        urls.append(urljoin(base_url, href))
    return urls