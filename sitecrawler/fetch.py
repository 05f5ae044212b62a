"""Fetching HTML pages over HTTP."""

import requests

from .colors import formatted_error_text

_TIMEOUT_SECONDS = 30


class FetchError(Exception):
    """Raised when a page cannot be retrieved as HTML."""


def get_html(raw_url: str) -> str:
    """Return the HTML body served at raw_url."""
    try:
        with requests.get(raw_url, timeout=_TIMEOUT_SECONDS) as resp:
            if resp.status_code >= 400:
                raise FetchError(f"getHTML::Recieved error code: {resp.status_code}")
            content_type = resp.headers.get("content-type", "")
            if "text/html" not in content_type:
                raise FetchError(
                    f"getHTML::{formatted_error_text()}::Content-type = {content_type}"
                )
            return resp.text
    except requests.RequestException as exc:
        raise FetchError(str(exc)) from exc