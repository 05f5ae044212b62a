import pytest
import responses

from sitecrawler.fetch import FetchError, get_html

URL = "https://example.com/page"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_returns_html_body(mocked):
    body = "<html><body>hello</body></html>"
    mocked.add(responses.GET, URL, body=body, status=200, content_type="text/html; charset=utf-8")
    assert get_html(URL) == body


def test_error_status_raises(mocked):
    mocked.add(responses.GET, URL, body="missing", status=404, content_type="text/html")
    with pytest.raises(FetchError, match="404"):
        get_html(URL)


def test_status_just_below_error_is_accepted(mocked):
    mocked.add(responses.GET, URL, body="<p>moved</p>", status=399, content_type="text/html")
    assert get_html(URL) == "<p>moved</p>"


def test_non_html_content_type_raises(mocked):
    mocked.add(responses.GET, URL, body="{}", status=200, content_type="application/json")
    with pytest.raises(FetchError, match="application/json"):
        get_html(URL)


def test_connection_failure_raises_fetch_error(mocked):
    with pytest.raises(FetchError):
        get_html("https://unreachable.example.com/")