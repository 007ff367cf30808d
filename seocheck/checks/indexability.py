"""Checks on whether and how a page can be indexed by search engines."""

from __future__ import annotations

from typing import Callable

from seocheck.issues import ErrorType, PageIssueReporter, query_all
from seocheck.models import PageReport


def _page_reporter(error_type: ErrorType, check: Callable[[PageReport], bool]) -> PageIssueReporter:
    """Build a reporter that looks at the page report alone."""
    return PageIssueReporter(error_type, lambda page, _doc, _headers: check(page))


def _html_reporter(error_type: ErrorType, check: Callable[..., bool]) -> PageIssueReporter:
    """Build a reporter whose check runs on crawled HTML pages only."""

    def callback(page_report: PageReport, document, headers) -> bool:
        if page_report.crawled and page_report.media_type == "text/html":
            return check(page_report, document)
        return False

    return PageIssueReporter(error_type, callback)


def no_indexable_reporter() -> PageIssueReporter:
    """Report pages that search engines are told not to index."""
    return _page_reporter(ErrorType.NO_INDEXABLE, lambda page: page.noindex)


def blocked_by_robotstxt_reporter() -> PageIssueReporter:
    """Report pages blocked by the robots.txt file."""
    return _page_reporter(ErrorType.BLOCKED, lambda page: page.blocked_by_robotstxt)


def no_index_in_sitemap_reporter() -> PageIssueReporter:
    """Report non-indexable pages listed in the sitemap."""
    return _page_reporter(
        ErrorType.SITEMAP_NO_INDEX, lambda page: page.in_sitemap and page.noindex
    )


def sitemap_and_blocked_reporter() -> PageIssueReporter:
    """Report pages listed in the sitemap but blocked by robots.txt."""
    return _page_reporter(
        ErrorType.SITEMAP_BLOCKED, lambda page: page.in_sitemap and page.blocked_by_robotstxt
    )


def non_canonical_in_sitemap_reporter() -> PageIssueReporter:
    """Report HTML pages whose canonical URL points elsewhere."""
    return _html_reporter(
        ErrorType.SITEMAP_NON_CANONICAL,
        lambda page, _doc: page.canonical not in ("", page.url),
    )


def metas_in_body_reporter() -> PageIssueReporter:
    """Report HTML pages with meta tags in the document body."""
    return _html_reporter(
        ErrorType.METAS_IN_BODY, lambda _page, doc: len(query_all(doc, "//body/meta")) > 0
    )


def nosnippet_reporter() -> PageIssueReporter:
    """Report HTML pages whose robots rules forbid a search snippet."""
    # max-snippet:0 limits the snippet to nothing, the same as nosnippet.
    return _html_reporter(
        ErrorType.NOSNIPPET,
        lambda page, _doc: "nosnippet" in page.robots or "max-snippet:0" in page.robots,
    )