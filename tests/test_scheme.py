from seocheck.checks.scheme import http_scheme_reporter
from seocheck.issues import ErrorType
from seocheck.models import PageReport


def test_http_scheme_no_issues():
    reporter = http_scheme_reporter()
    assert reporter.error_type == ErrorType.HTTP_SCHEME
    page = PageReport(crawled=True, url="https://example.com", status_code=200)
    assert reporter(page, None, {}) is False


def test_http_scheme_issues():
    page = PageReport(crawled=True, url="http://example.com", status_code=200)
    assert http_scheme_reporter()(page, None, {}) is True


def test_http_scheme_ignores_redirects():
    page = PageReport(crawled=True, url="http://example.com", status_code=301)
    assert http_scheme_reporter()(page, None, {}) is False


def test_http_scheme_ignores_uncrawled_pages():
    page = PageReport(url="http://example.com", status_code=200)
    assert http_scheme_reporter()(page, None, {}) is False