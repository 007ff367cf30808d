from seocheck.checks.timeout import timeout_reporter
from seocheck.issues import ErrorType
from seocheck.models import PageReport


def test_timeout_no_issues():
    page = PageReport(crawled=True, media_type="text/html", status_code=200)
    reporter = timeout_reporter()
    assert reporter.error_type is ErrorType.TIMEOUT
    assert reporter(page, None, {}) is False


def test_timeout_issues():
    reporter = timeout_reporter()
    assert reporter.error_type is ErrorType.TIMEOUT
    assert reporter(PageReport(timeout=True), None, {}) is True