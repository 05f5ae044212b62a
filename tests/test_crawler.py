import pytest
import responses

from sitecrawler.crawler import Crawler, configure
from sitecrawler.normalize import URLParseError

BASE = "https://example.com"

HOME = """
<html><body>
<a href="/a">A</a>
<a href="/b">B</a>
<a href="https://other.com/x">Other</a>
<a href="/a">A again</a>
</body></html>
"""
PAGE_A = '<html><body><a href="/">home</a></body></html>'
PAGE_B = "<html><body>no links</body></html>"


@pytest.fixture
def site():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, BASE + "/", body=HOME, content_type="text/html")
        rsps.add(responses.GET, BASE + "/a", body=PAGE_A, content_type="text/html")
        rsps.add(responses.GET, BASE + "/b", body=PAGE_B, content_type="text/html")
        yield rsps


def test_add_page_visit_reports_first_visit_only():
    crawler = configure(BASE, 1, 5)
    assert crawler.add_page_visit(BASE) is True
    assert crawler.add_page_visit(BASE) is False
    assert crawler.pages[BASE] == 2


def test_over_page_limit():
    crawler = configure(BASE, 1, 1)
    assert crawler.over_page_limit() is False
    crawler.add_page_visit(BASE)
    assert crawler.over_page_limit() is True


def test_crawl_page_returns_links_resolved_against_base(site):
    crawler = configure(BASE, 1, 10)
    links = crawler.crawl_page(BASE)
    assert links == [BASE + "/a", BASE + "/b", "https://other.com/x", BASE + "/a"]


def test_crawl_page_skips_other_domains(capsys):
    crawler = configure(BASE, 1, 10)
    assert crawler.crawl_page("https://other.com/x") == []
    assert crawler.pages == {}
    assert "Domains don't match" in capsys.readouterr().out


def test_crawl_page_second_visit_is_counted_not_fetched(site):
    crawler = configure(BASE, 1, 10)
    crawler.crawl_page(BASE)
    assert crawler.crawl_page(BASE + "/") == []
    assert crawler.pages == {BASE: 2}


def test_crawl_counts_internal_links(site):
    pages = configure(BASE, 2, 10).crawl()
    assert pages == {BASE: 2, BASE + "/a": 2, BASE + "/b": 1}


def test_crawl_stops_at_page_limit(site):
    crawler = configure(BASE, 3, 1)
    pages = crawler.crawl()
    assert pages == {BASE: 1}
    assert len(pages) <= crawler.max_pages


def test_crawl_page_survives_fetch_error(capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, BASE + "/", status=500, content_type="text/html")
        crawler = configure(BASE, 1, 10)
        assert crawler.crawl_page(BASE) == []
    assert crawler.pages == {BASE: 1}
    assert "Could not get HTML" in capsys.readouterr().out


def test_configure_rejects_invalid_url():
    with pytest.raises(URLParseError, match="couldn't parse url"):
        configure(r":\\invalidBaseURL", 1, 1)


def test_crawler_rejects_zero_concurrency():
    with pytest.raises(ValueError):
        Crawler(BASE, 0, 5)