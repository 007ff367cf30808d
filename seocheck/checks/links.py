"""Checks on the links found on a page."""

from __future__ import annotations

from typing import Callable

from seocheck.issues import ErrorType, PageIssueReporter
from seocheck.models import PageReport

MAX_LINKS = 100


def _link_reporter(
    error_type: ErrorType, check: Callable[[PageReport], bool], *, successful: bool = True
) -> PageIssueReporter:
    """Build a reporter for crawled HTML pages, by default only those answering 2xx."""

    def callback(page_report: PageReport, document, headers) -> bool:
        if not (page_report.crawled and page_report.media_type == "text/html"):
            return False
        if successful and not 200 <= page_report.status_code < 300:
            return False
        return check(page_report)

    return PageIssueReporter(error_type, callback)


def too_many_links_reporter() -> PageIssueReporter:
    """Report successful HTML pages with more than 100 internal links."""
    return _link_reporter(ErrorType.TOO_MANY_LINKS, lambda page: len(page.links) > MAX_LINKS)


def internal_nofollow_links_reporter() -> PageIssueReporter:
    """Report successful HTML pages with internal links marked nofollow."""
    return _link_reporter(
        ErrorType.INTERNAL_NOFOLLOW, lambda page: any(link.nofollow for link in page.links)
    )


def external_link_without_nofollow_reporter() -> PageIssueReporter:
    """Report successful HTML pages with external links not marked nofollow."""
    return _link_reporter(
        ErrorType.EXTERNAL_WITHOUT_NOFOLLOW,
        lambda page: any(not link.nofollow for link in page.external_links),
    )


def http_links_reporter() -> PageIssueReporter:
    """Report successful HTML pages with internal links using the http scheme."""
    return _link_reporter(
        ErrorType.HTTP_LINKS,
        lambda page: any(
            link.parsed_url is not None and link.parsed_url.scheme == "http"
            for link in page.links
        ),
    )


def deadend_reporter() -> PageIssueReporter:
    """Report successful HTML pages without any internal or external link."""
    return _link_reporter(
        ErrorType.DEADEND, lambda page: not page.links and not page.external_links
    )


def external_link_redirect_reporter() -> PageIssueReporter:
    """Report HTML pages with external links that answer with a redirect."""
    return _link_reporter(
        ErrorType.EXTERNAL_LINK_REDIRECT,
        lambda page: any(300 <= link.status_code <= 399 for link in page.external_links),
        successful=False,
    )


def external_link_broken_reporter() -> PageIssueReporter:
    """Report HTML pages with external links that fail or answer with an error."""
    return _link_reporter(
        ErrorType.EXTERNAL_LINK_BROKEN,
        lambda page: any(
            link.status_code < 0 or link.status_code > 399 for link in page.external_links
        ),
        successful=False,
    )