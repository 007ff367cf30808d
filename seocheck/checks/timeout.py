"""Check for pages whose request timed out."""

from __future__ import annotations

from seocheck.issues import Document, ErrorType, Headers, PageIssueReporter
from seocheck.models import PageReport


def _timeout(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    return page_report.timeout


def timeout_reporter() -> PageIssueReporter:
    """Report pages whose request timed out."""
    return PageIssueReporter(ErrorType.TIMEOUT, _timeout)