"""Checks on the title of a page."""

from __future__ import annotations

from seocheck.issues import Document, ErrorType, Headers, PageIssueReporter, query_all
from seocheck.models import PageReport

MIN_TITLE_LENGTH = 20
MAX_TITLE_LENGTH = 60


def _is_crawled_html(page_report: PageReport) -> bool:
    return page_report.crawled and page_report.media_type == "text/html"


def _title_length(page_report: PageReport) -> int:
    # Lengths are measured in encoded bytes.
    return len(page_report.title.encode("utf-8"))


def _empty_title(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if not _is_crawled_html(page_report):
        return False
    if not 200 <= page_report.status_code < 300:
        return False
    return page_report.title == ""


def empty_title_reporter() -> PageIssueReporter:
    """Report successful HTML pages with an empty or missing title."""
    return PageIssueReporter(ErrorType.EMPTY_TITLE, _empty_title)


def _short_title(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if not _is_crawled_html(page_report):
        return False
    return 0 < _title_length(page_report) < MIN_TITLE_LENGTH


def short_title_reporter() -> PageIssueReporter:
    """Report HTML pages with a title shorter than 20 bytes."""
    return PageIssueReporter(ErrorType.SHORT_TITLE, _short_title)


def _long_title(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if not _is_crawled_html(page_report):
        return False
    return _title_length(page_report) > MAX_TITLE_LENGTH


def long_title_reporter() -> PageIssueReporter:
    """Report HTML pages with a title longer than 60 bytes."""
    return PageIssueReporter(ErrorType.LONG_TITLE, _long_title)


def _multiple_title_tags(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if not _is_crawled_html(page_report):
        return False
    return len(query_all(document, "//head/title")) > 1


def multiple_title_tags_reporter() -> PageIssueReporter:
    """Report HTML pages with more than one title tag in the head section."""
    return PageIssueReporter(ErrorType.MULTIPLE_TITLE_TAGS, _multiple_title_tags)