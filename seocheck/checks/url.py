"""Checks on the shape of a page's URL."""

from __future__ import annotations

from seocheck.issues import Document, ErrorType, Headers, PageIssueReporter
from seocheck.models import PageReport


def _underscore_url(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    return "_" in page_report.url


def underscore_url_reporter() -> PageIssueReporter:
    """Report pages whose URL contains an underscore."""
    return PageIssueReporter(ErrorType.UNDERSCORE_URL, _underscore_url)


def _space_url(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    return " " in page_report.url


def space_url_reporter() -> PageIssueReporter:
    """Report pages whose URL contains a space."""
    return PageIssueReporter(ErrorType.SPACE_URL, _space_url)


def _multiple_slashes(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    parsed = page_report.parsed_url
    return parsed is not None and "//" in parsed.path


def multiple_slashes_reporter() -> PageIssueReporter:
    """Report pages whose URL path contains consecutive slashes."""
    return PageIssueReporter(ErrorType.MULTIPLE_SLASHES, _multiple_slashes)