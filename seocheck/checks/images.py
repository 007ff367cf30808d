"""Checks on the images of a page and on image resources themselves."""

from __future__ import annotations

from typing import Callable

from seocheck.issues import ErrorType, PageIssueReporter, query_all
from seocheck.models import PageReport

MAX_ALT_LENGTH = 100
MAX_IMAGE_SIZE = 500_000


def _html_reporter(error_type: ErrorType, check: Callable[..., bool]) -> PageIssueReporter:
    """Build a reporter whose check runs on crawled HTML pages only."""

    def callback(page_report: PageReport, document, headers) -> bool:
        if page_report.crawled and page_report.media_type == "text/html":
            return check(page_report, document)
        return False

    return PageIssueReporter(error_type, callback)


def _picture_without_img(page_report: PageReport, document) -> bool:
    return any(not query_all(picture, "//img") for picture in query_all(document, "//picture"))


def _img_without_size(page_report: PageReport, document) -> bool:
    return any(
        not img.get("width", "") or not img.get("height", "")
        for img in query_all(document, "//img")
    )


def alt_text_reporter() -> PageIssueReporter:
    """Report HTML pages with images whose alt text is empty or missing."""
    return _html_reporter(
        ErrorType.IMAGES_WITH_NO_ALT,
        lambda page, _doc: any(image.alt == "" for image in page.images),
    )


def long_alt_text_reporter() -> PageIssueReporter:
    """Report HTML pages with images whose alt text is longer than 100 characters."""
    return _html_reporter(
        ErrorType.LONG_ALT_TEXT,
        lambda page, _doc: any(len(image.alt) > MAX_ALT_LENGTH for image in page.images),
    )


def large_image_reporter() -> PageIssueReporter:
    """Report image resources larger than 500,000 bytes."""
    return PageIssueReporter(
        ErrorType.LARGE_IMAGE,
        lambda page, _doc, _headers: page.media_type.startswith("image")
        and page.size > MAX_IMAGE_SIZE,
    )


def no_image_index_reporter() -> PageIssueReporter:
    """Report HTML pages whose robots rules keep images out of the index."""
    return _html_reporter(ErrorType.NO_IMAGE_INDEX, lambda page, _doc: "noimageindex" in page.robots)


def missing_img_tag_in_picture_reporter() -> PageIssueReporter:
    """Report HTML pages with picture elements but no img element to fall back on."""
    return _html_reporter(ErrorType.MISSING_IMG_ELEMENT, _picture_without_img)


def img_without_size_reporter() -> PageIssueReporter:
    """Report HTML pages with img elements lacking a width or height attribute."""
    return _html_reporter(ErrorType.IMG_WITHOUT_SIZE, _img_without_size)