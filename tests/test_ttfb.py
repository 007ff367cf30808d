import pytest

from seocheck.checks.ttfb import slow_ttfb_reporter
from seocheck.issues import ErrorType
from seocheck.models import PageReport


def test_no_slow_ttfb():
    page = PageReport(url="https://example.com/some-url", ttfb=100)
    reporter = slow_ttfb_reporter()
    assert reporter.error_type is ErrorType.SLOW_TTFB
    assert reporter(page, None, {}) is False


def test_slow_ttfb():
    page = PageReport(url="https://example.com/some-url", ttfb=1000)
    reporter = slow_ttfb_reporter()
    assert reporter.error_type is ErrorType.SLOW_TTFB
    assert reporter(page, None, {}) is True


@pytest.mark.parametrize("ttfb, expected", [(800, False), (801, True)])
def test_slow_ttfb_boundary(ttfb, expected):
    assert slow_ttfb_reporter()(PageReport(ttfb=ttfb), None, {}) is expected