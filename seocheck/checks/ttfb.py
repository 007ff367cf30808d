"""Check on the time to first byte of a page."""

from __future__ import annotations

from seocheck.issues import Document, ErrorType, Headers, PageIssueReporter
from seocheck.models import PageReport

MAX_TTFB_MS = 800


def _slow_ttfb(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    return page_report.ttfb > MAX_TTFB_MS


def slow_ttfb_reporter() -> PageIssueReporter:
    """Report pages whose time to first byte exceeds 800 milliseconds."""
    return PageIssueReporter(ErrorType.SLOW_TTFB, _slow_ttfb)