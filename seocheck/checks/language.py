"""Checks on the declared language of a page."""

from __future__ import annotations

import re

from seocheck.issues import Document, ErrorType, Headers, PageIssueReporter
from seocheck.models import PageReport

_LANGUAGE_TAG = re.compile(
    r"""
    (?:
        (?:[a-z]{2,3}(?:-[a-z]{3}){0,3}|[a-z]{4}|[a-z]{5,8})   # language
        (?:-[a-z]{4})?                                         # script
        (?:-(?:[a-z]{2}|[0-9]{3}))?                            # region
        (?:-(?:[a-z0-9]{5,8}|[0-9][a-z0-9]{3}))*               # variants
        (?:-[0-9a-wy-z](?:-[a-z0-9]{2,8})+)*                   # extensions
        (?:-x(?:-[a-z0-9]{1,8})+)?                             # private use
    |
        x(?:-[a-z0-9]{1,8})+
    )
    """,
    re.VERBOSE,
)


def is_valid_language_tag(tag: str) -> bool:
    """Return True if ``tag`` is a well-formed BCP 47 language tag."""
    if not tag or not tag.isascii():
        return False
    return _LANGUAGE_TAG.fullmatch(tag.lower().replace("_", "-")) is not None


def _is_checked_page(page_report: PageReport) -> bool:
    return (
        page_report.crawled
        and page_report.media_type == "text/html"
        and not 300 <= page_report.status_code < 400
    )


def _invalid_lang(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if not _is_checked_page(page_report) or not page_report.lang:
        return False
    return not all(is_valid_language_tag(tag) for tag in page_report.lang.split(","))


def invalid_lang_reporter() -> PageIssueReporter:
    """Report non-redirect HTML pages whose language attribute is not a valid tag."""
    return PageIssueReporter(ErrorType.INVALID_LANGUAGE, _invalid_lang)


def _missing_lang(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    return _is_checked_page(page_report) and page_report.lang == ""


def missing_lang_reporter() -> PageIssueReporter:
    """Report non-redirect HTML pages with a missing or empty language attribute."""
    return PageIssueReporter(ErrorType.NO_LANG, _missing_lang)