"""Checks on the HTTP status code of a page."""

from __future__ import annotations

from seocheck.issues import ErrorType, PageIssueReporter
from seocheck.models import PageReport


def _status_reporter(error_type: ErrorType, low: int, high: int | None = None) -> PageIssueReporter:
    """Build a reporter for crawled pages whose status code lies in [low, high)."""

    def callback(page_report: PageReport, document, headers) -> bool:
        code = page_report.status_code
        return page_report.crawled and code >= low and (high is None or code < high)

    return PageIssueReporter(error_type, callback)


def status_30x_reporter() -> PageIssueReporter:
    """Report crawled pages answering with a 3xx status code."""
    return _status_reporter(ErrorType.STATUS_30X, 300, 400)


def status_40x_reporter() -> PageIssueReporter:
    """Report crawled pages answering with a 4xx status code."""
    return _status_reporter(ErrorType.STATUS_40X, 400, 500)


def status_50x_reporter() -> PageIssueReporter:
    """Report crawled pages answering with a status code of 500 or above."""
    return _status_reporter(ErrorType.STATUS_50X, 500)