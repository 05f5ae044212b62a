# sitecrawler

A small concurrent web crawler. Give it the address of a site and it follows
the links it finds, stays on the same host, and prints a report of how often
each page on that host was linked to.

## Installation

```
pip install .
```

## Usage

```
sitecrawler URL [MAX_CONCURRENCY] [MAX_PAGES]
```

- `URL`: the page to start from. Only pages whose host matches this URL's
  host are crawled.
- `MAX_CONCURRENCY`: how many pages are fetched at once (default 3, must be
  at least 1).
- `MAX_PAGES`: once this many distinct pages have been recorded, no further
  pages are crawled (default 5).

Example:

```
sitecrawler https://example.com 4 20
```

The command prints each URL as it is crawled, and a message for pages that
are skipped (another host, already visited, could not be fetched). When the
crawl is finished it prints the elapsed time, then a report with the
most-linked pages first:

```
=============================
  REPORT for https://example.com
=============================
Found 7 internal links to https://example.com/about
Found 3 internal links to https://example.com
```

The report's counts and URLs are coloured with terminal escape codes. Pages
are recorded under their normalized URL (see `normalize_url` below). Only
responses with a status below 400 and a `text/html` content type are read
for further links.

The command exits with status 1 when no URL is given, when a number cannot be
read, when there are too many arguments, or when the URL cannot be parsed.

## Use from Python

```python
from sitecrawler.crawler import configure
from sitecrawler.report import print_report

crawler = configure("https://example.com", max_concurrency=4, max_pages=20)
pages = crawler.crawl()
print_report(pages, crawler.base_url)
```

`Crawler.crawl()` returns a dictionary mapping each normalized URL to the
number of times it was reached. `Crawler.crawl_page(url)` visits a single
page and returns the links found on it. `configure` raises `URLParseError`
when the base URL cannot be parsed.

There are also building blocks you can use on their own:

- `sitecrawler.normalize.normalize_url(url)` turns a URL into one consistent
  form: it uses `https` when no scheme is given, lower-cases the host, drops
  any port and a leading `www.`, and drops a trailing slash from the path.
  It raises `URLParseError` when the URL cannot be parsed.
- `sitecrawler.fetch.get_html(url)` fetches a page's HTML. It raises
  `FetchError` on a network error, an error status, or content that is not
  HTML.
- `sitecrawler.links.get_urls_from_html(html, base_url)` returns the `href`
  of every anchor in the document, resolved against `base_url`. Hrefs that
  cannot be parsed are skipped with a printed message; a base URL that cannot
  be parsed raises `URLParseError`.
- `sitecrawler.report.format_report(pages, base_url)` returns the report text
  without printing it; `print_report` prints it.

## Limits

The crawler does not read `robots.txt`, does not throttle its requests beyond
the concurrency limit, and does not save pages or the report anywhere; the
report is only printed.

## Running the tests

```
pip install .[test]
pytest
```