"""Checks on the security headers and policies of a page."""

from __future__ import annotations

import re

from seocheck.issues import (
    Document,
    ErrorType,
    Headers,
    PageIssueReporter,
    header_value,
    query_all,
)
from seocheck.models import PageReport

_MAX_AGE_PREFIX = "max-age="
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _is_integer(text: str) -> bool:
    if not _INTEGER.fullmatch(text):
        return False
    return _INT64_MIN <= int(text) <= _INT64_MAX


def _missing_hsts(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    hsts = header_value(headers, "Strict-Transport-Security")
    if not hsts:
        return True
    return any(
        directive.startswith(_MAX_AGE_PREFIX)
        and not _is_integer(directive[len(_MAX_AGE_PREFIX):])
        for directive in hsts.split(";")
    )


def missing_hsts_header_reporter() -> PageIssueReporter:
    """Report pages whose Strict-Transport-Security header is missing or invalid."""
    return PageIssueReporter(ErrorType.MISSING_HSTS_HEADER, _missing_hsts)


def _missing_csp(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if page_report.media_type != "text/html":
        return False
    tags = query_all(document, '//head/meta[@http-equiv="Content-Security-Policy"]')
    return not tags and not header_value(headers, "Content-Security-Policy")


def missing_csp_reporter() -> PageIssueReporter:
    """Report HTML pages with no Content-Security-Policy in headers or meta tags."""
    return PageIssueReporter(ErrorType.MISSING_CSP, _missing_csp)


def _missing_content_type_options(
    page_report: PageReport, document: Document | None, headers: Headers | None
) -> bool:
    if page_report.media_type != "text/html":
        return False
    return header_value(headers, "X-Content-Type-Options") != "nosniff"


def missing_content_type_options_reporter() -> PageIssueReporter:
    """Report HTML pages without an X-Content-Type-Options: nosniff header."""
    return PageIssueReporter(
        ErrorType.CONTENT_TYPE_OPTIONS, _missing_content_type_options
    )