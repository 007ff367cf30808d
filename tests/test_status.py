import pytest

from seocheck.checks.status import (
    status_30x_reporter,
    status_40x_reporter,
    status_50x_reporter,
)
from seocheck.issues import ErrorType
from seocheck.models import PageReport


@pytest.mark.parametrize(
    "factory, error_type",
    [
        (status_30x_reporter, ErrorType.STATUS_30X),
        (status_40x_reporter, ErrorType.STATUS_40X),
        (status_50x_reporter, ErrorType.STATUS_50X),
    ],
)
def test_no_issues_for_200(factory, error_type):
    reporter = factory()
    assert reporter.error_type == error_type
    assert reporter(PageReport(crawled=True, status_code=200), None, {}) is False


@pytest.mark.parametrize(
    "factory, status",
    [
        (status_30x_reporter, 301),
        (status_40x_reporter, 401),
        (status_50x_reporter, 501),
    ],
)
def test_issues_in_range(factory, status):
    assert factory()(PageReport(crawled=True, status_code=status), None, {}) is True


@pytest.mark.parametrize(
    "factory, status",
    [
        (status_30x_reporter, 301),
        (status_40x_reporter, 401),
        (status_50x_reporter, 501),
    ],
)
def test_not_crawled_reports_nothing(factory, status):
    assert factory()(PageReport(status_code=status), None, {}) is False


def test_range_boundaries():
    assert status_30x_reporter()(PageReport(crawled=True, status_code=400), None, {}) is False
    assert status_40x_reporter()(PageReport(crawled=True, status_code=500), None, {}) is False
    assert status_50x_reporter()(PageReport(crawled=True, status_code=599), None, {}) is True