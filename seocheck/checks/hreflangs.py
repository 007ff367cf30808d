"""Checks on the hreflang annotations of a page."""

from __future__ import annotations

from typing import Callable
from urllib.parse import urlsplit

from seocheck.issues import ErrorType, PageIssueReporter, query_all
from seocheck.models import PageReport

_X_DEFAULT = "x-default"


def _html_reporter(error_type: ErrorType, check: Callable[..., bool]) -> PageIssueReporter:
    """Build a reporter whose check runs on crawled HTML pages only."""

    def callback(page_report: PageReport, document, headers) -> bool:
        if page_report.crawled and page_report.media_type == "text/html":
            return check(page_report, document)
        return False

    return PageIssueReporter(error_type, callback)


def _has_relative_alternate(page_report: PageReport, document) -> bool:
    for node in query_all(document, '//head/link[@rel="alternate"]'):
        try:
            parsed = urlsplit(node.get("href", ""))
        except ValueError:
            return False
        if not parsed.scheme:
            return True
    return False


def hreflang_x_default_missing() -> PageIssueReporter:
    """Report pages whose hreflang annotations have no x-default entry."""
    return _html_reporter(
        ErrorType.HREFLANG_MISSING_X_DEFAULT,
        lambda page, _doc: bool(page.hreflangs)
        and all(hreflang.lang != _X_DEFAULT for hreflang in page.hreflangs),
    )


def hreflang_missing_self_reference() -> PageIssueReporter:
    """Report pages whose hreflang annotations do not point back to the page itself."""
    return _html_reporter(
        ErrorType.HREFLANG_MISSING_SELF_REFERENCE,
        lambda page, _doc: bool(page.hreflangs)
        and all(hreflang.url != page.url for hreflang in page.hreflangs),
    )


def hreflang_mismatching_lang() -> PageIssueReporter:
    """Report pages whose self-referencing hreflang language differs from the page language."""
    return _html_reporter(
        ErrorType.HREFLANG_MISMATCH_LANG,
        lambda page, _doc: bool(page.lang)
        and any(
            hreflang.url == page.url and hreflang.lang not in (_X_DEFAULT, page.lang)
            for hreflang in page.hreflangs
        ),
    )


def hreflang_relative_url() -> PageIssueReporter:
    """Report pages with alternate links whose URLs are relative."""
    return _html_reporter(ErrorType.HREFLANG_RELATIVE_URL, _has_relative_alternate)