"""Checks on the URL scheme of a page."""

from __future__ import annotations

from seocheck.issues import ErrorType, PageIssueReporter
from seocheck.models import PageReport


def _served_over_http(page_report: PageReport, document, headers) -> bool:
    if not page_report.crawled or not 200 <= page_report.status_code < 300:
        return False
    return page_report.parsed_url is not None and page_report.parsed_url.scheme == "http"


def http_scheme_reporter() -> PageIssueReporter:
    """Report successful pages served over http instead of https."""
    return PageIssueReporter(ErrorType.HTTP_SCHEME, _served_over_http)