"""Issue types, the reporter records and the HTML and header helpers they use."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Mapping, Optional, Sequence, Union

from lxml import etree

from seocheck.models import Crawl, PageReport

Document = etree._Element
Headers = Mapping[str, Union[str, Sequence[str]]]


class ErrorType(str, Enum):
    """Kinds of issue a page can be reported for."""

    STATUS_30X = "status_30x"
    STATUS_40X = "status_40x"
    STATUS_50X = "status_50x"
    EMPTY_TITLE = "empty_title"
    SHORT_TITLE = "short_title"
    LONG_TITLE = "long_title"
    MULTIPLE_TITLE_TAGS = "multiple_title_tags"
    NO_INDEXABLE = "no_indexable"
    BLOCKED = "blocked"
    SITEMAP_NO_INDEX = "sitemap_no_index"
    SITEMAP_BLOCKED = "sitemap_blocked"
    SITEMAP_NON_CANONICAL = "sitemap_non_canonical"
    METAS_IN_BODY = "metas_in_body"
    NOSNIPPET = "nosnippet"
    TOO_MANY_LINKS = "too_many_links"
    INTERNAL_NOFOLLOW = "internal_nofollow"
    EXTERNAL_WITHOUT_NOFOLLOW = "external_without_nofollow"
    HTTP_LINKS = "http_links"
    DEADEND = "deadend"
    EXTERNAL_LINK_REDIRECT = "external_link_redirect"
    EXTERNAL_LINK_BROKEN = "external_link_broken"
    IMAGES_WITH_NO_ALT = "images_with_no_alt"
    LONG_ALT_TEXT = "long_alt_text"
    LARGE_IMAGE = "large_image"
    NO_IMAGE_INDEX = "no_image_index"
    MISSING_IMG_ELEMENT = "missing_img_element"
    IMG_WITHOUT_SIZE = "img_without_size"
    INVALID_LANGUAGE = "invalid_language"
    NO_LANG = "no_lang"
    HREFLANG_MISSING_X_DEFAULT = "hreflang_missing_x_default"
    HREFLANG_MISSING_SELF_REFERENCE = "hreflang_missing_self_reference"
    HREFLANG_MISMATCH_LANG = "hreflang_mismatch_lang"
    HREFLANG_RELATIVE_URL = "hreflang_relative_url"
    HTTP_SCHEME = "http_scheme"
    MISSING_HSTS_HEADER = "missing_hsts_header"
    MISSING_CSP = "missing_csp"
    CONTENT_TYPE_OPTIONS = "content_type_options"
    TIMEOUT = "timeout"
    UNDERSCORE_URL = "underscore_url"
    SPACE_URL = "space_url"
    MULTIPLE_SLASHES = "multiple_slashes"
    SLOW_TTFB = "slow_ttfb"


PageCheck = Callable[[PageReport, Optional[Document], Optional[Headers]], bool]


@dataclass(frozen=True)
class PageIssueReporter:
    """A check run on every page; an issue of ``error_type`` is raised when it returns True."""

    error_type: ErrorType
    callback: PageCheck

    def __call__(
        self,
        page_report: PageReport,
        document: Document | None = None,
        headers: Headers | None = None,
    ) -> bool:
        return bool(self.callback(page_report, document, headers))


@dataclass
class MultipageIssueReporter:
    """A stream of page report ids, each of which gets an issue of ``error_type``."""

    pstream: Iterable[int]
    error_type: ErrorType

    def page_report_ids(self) -> Iterator[int]:
        yield from self.pstream


MultipageCallback = Callable[[Crawl], MultipageIssueReporter]

_PARSER = etree.HTMLParser(encoding="utf-8")
_SKELETON = b"<html><head></head><body></body></html>"


def parse_html(source: str | bytes) -> Document:
    """Parse an HTML document, always giving an html root with head and body."""
    data = source.encode("utf-8") if isinstance(source, str) else source
    root = etree.fromstring(data, _PARSER) if data.strip() else None
    if root is None:
        return etree.fromstring(_SKELETON, _PARSER)
    if root.find("head") is None:
        root.insert(0, etree.Element("head"))
    if root.find("body") is None:
        root.append(etree.Element("body"))
    return root


def query_all(document: Document | None, xpath: str) -> list:
    """Return the nodes an XPath expression selects; an absent document selects nothing."""
    if document is None:
        return []
    try:
        result = document.xpath(xpath)
    except etree.XPathError as exc:
        raise ValueError(f"invalid xpath expression {xpath!r}: {exc}") from exc
    if not isinstance(result, list):
        raise ValueError(f"xpath expression {xpath!r} does not select nodes")
    return result


def header_value(headers: Headers | None, name: str) -> str:
    """Return the first value of a header, matched case-insensitively, or ''."""
    if not headers:
        return ""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() != wanted:
            continue
        if isinstance(value, str):
            return value
        return next(iter(value), "")
    return ""