"""URL parsing and normalisation."""

from __future__ import annotations

from dataclasses import dataclass

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DIGITS = frozenset("0123456789")


class URLParseError(ValueError):
    """Raised when a URL cannot be parsed."""


@dataclass
class _ParsedURL:
    scheme: str = ""
    opaque: str = ""
    userinfo: str | None = None
    host: str = ""
    path: str = ""
    query: str | None = None
    fragment: str = ""

    def hostname(self) -> str:
        """Host without port and without IPv6 brackets."""
        host = self.host
        if host.startswith("["):
            end = host.find("]")
            return host[1:end] if end != -1 else host[1:]
        name, colon, port = host.rpartition(":")
        if colon and all(c in _DIGITS for c in port):
            return name
        return host

    def geturl(self) -> str:
        if self.opaque:
            out = f"{self.scheme}:{self.opaque}"
        else:
            out = f"{self.scheme}:" if self.scheme else ""
            if self.scheme or self.host or self.userinfo is not None:
                if self.host or self.path or self.userinfo is not None:
                    out += "//"
                if self.userinfo is not None:
                    out += f"{self.userinfo}@"
                out += self.host
            if self.path and not self.path.startswith("/") and self.host:
                out += "/"
            if not out and ":" in self.path.partition("/")[0]:
                out = "./"
            out += self.path
        if self.query is not None:
            out += f"?{self.query}"
        if self.fragment:
            out += f"#{self.fragment}"
        return out


def _check_escapes(text: str) -> None:
    pos = text.find("%")
    while pos != -1:
        code = text[pos + 1 : pos + 3]
        if len(code) < 2 or not all(c in _HEX_DIGITS for c in code):
            raise ValueError(f'invalid URL escape "{text[pos:pos + 3]}"')
        pos = text.find("%", pos + 3)


def _get_scheme(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if char.isascii() and char.isalpha():
            continue
        if char.isdigit() or char in "+-.":
            if index == 0:
                return "", raw
            continue
        if char == ":":
            if index == 0:
                raise ValueError("missing protocol scheme")
            return raw[:index], raw[index + 1 :]
        return "", raw
    return "", raw


def _check_host(host: str) -> None:
    if host.startswith("["):
        end = host.find("]")
        if end == -1:
            raise ValueError("missing ']' in host")
        port = host[end + 1 :]
        if port and not (port.startswith(":") and all(c in _DIGITS for c in port[1:])):
            raise ValueError(f'invalid port "{port}" after host')
    else:
        colon = host.rfind(":")
        if colon != -1 and not all(c in _DIGITS for c in host[colon + 1 :]):
            raise ValueError(f'invalid port "{host[colon:]}" after host')
    _check_escapes(host)


def _split_url(raw: str) -> _ParsedURL:
    """Parse a URL strictly, raising URLParseError on malformed input."""
    try:
        return _parse(raw)
    except ValueError as exc:
        raise URLParseError(f'parse "{raw}": {exc}') from exc


def _parse(raw: str) -> _ParsedURL:
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        raise ValueError("net/url: invalid control character in URL")
    rest, _, fragment = raw.partition("#")
    _check_escapes(fragment)

    scheme, rest = _get_scheme(rest)
    parsed = _ParsedURL(scheme=scheme.lower(), fragment=fragment)

    if "?" in rest:
        rest, _, parsed.query = rest.partition("?")

    if not rest.startswith("/"):
        if parsed.scheme:
            parsed.opaque = rest
            return parsed
        if ":" in rest.partition("/")[0]:
            raise ValueError("first path segment in URL cannot contain colon")

    if (parsed.scheme or not rest.startswith("///")) and rest.startswith("//"):
        authority, slash, path = rest[2:].partition("/")
        rest = slash + path
        userinfo, at, host = authority.rpartition("@")
        parsed.userinfo = userinfo if at else None
        _check_host(host)
        parsed.host = host

    _check_escapes(rest)
    parsed.path = rest
    return parsed


def normalize_url(input_url: str) -> str:
    """Bring a URL to a consistent form for de-duplication.

    The scheme defaults to https, the host is lower-cased with any port and
    leading "www." removed, and one trailing slash is dropped from the path.
    """
    try:
        parsed = _split_url(input_url)
    except URLParseError as exc:
        raise URLParseError(f"couldn't parse URL: {exc}") from exc
    if not parsed.scheme:
        parsed.scheme = "https"
    parsed.host = parsed.hostname().removeprefix("www.").lower()
    parsed.path = parsed.path.removesuffix("/")
    return parsed.geturl()