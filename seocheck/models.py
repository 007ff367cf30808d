"""Data records shared by the crawler, the issue checks and the views."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable
from urllib.parse import SplitResult, urlsplit


@dataclass
class ArchiveRecord:
    """A stored HTTP response: raw headers and body."""

    headers: str = ""
    body: str = ""


@dataclass
class BasicAuth:
    """Credentials used for HTTP basic authentication."""

    auth_user: str = ""
    auth_pass: str = ""


@dataclass
class ChartItem:
    key: str = ""
    value: int = 0


Chart = list[ChartItem]


@dataclass
class CountItem:
    key: str = ""
    value: int = 0


CountList = list[CountItem]


def sort_counts(items: Iterable[CountItem]) -> CountList:
    """Return the items ordered by ascending value, keeping ties in input order."""
    return sorted(items, key=lambda item: item.value)


@dataclass
class Crawl:
    id: int = 0
    project_id: int = 0
    crawling: bool = False
    url: str = ""
    start: datetime | None = None
    end: datetime | None = None
    total_issues: int = 0
    total_urls: int = 0
    issues_end: datetime | None = None
    critical_issues: int = 0
    alert_issues: int = 0
    warning_issues: int = 0
    blocked_by_robotstxt: int = 0
    noindex: int = 0
    sitemap_exists: bool = False
    sitemap_is_blocked: bool = False
    robotstxt_exists: bool = False
    internal_follow_links: int = 0
    internal_nofollow_links: int = 0
    external_follow_links: int = 0
    external_nofollow_links: int = 0
    sponsored_links: int = 0
    ugc_links: int = 0


@dataclass
class ExportLink:
    origin: str = ""
    destination: str = ""
    text: str = ""


@dataclass
class ExportImage:
    origin: str = ""
    image: str = ""
    alt: str = ""


@dataclass
class Script:
    origin: str = ""
    script: str = ""


@dataclass
class Style:
    origin: str = ""
    style: str = ""


@dataclass
class Iframe:
    origin: str = ""
    iframe: str = ""


@dataclass
class Audio:
    origin: str = ""
    audio: str = ""


@dataclass
class ExportVideo:
    origin: str = ""
    video: str = ""


@dataclass
class ExportHreflang:
    origin: str = ""
    origin_lang: str = ""
    hreflang: str = ""
    hreflang_lang: str = ""


@dataclass
class Hreflang:
    url: str = ""
    lang: str = ""


@dataclass
class Image:
    url: str = ""
    alt: str = ""


@dataclass
class Video:
    url: str = ""
    poster: str = ""


@dataclass
class Link:
    """A link found on a page; ``parsed_url`` is derived from ``url`` when not given."""

    url: str = ""
    parsed_url: SplitResult | None = None
    rel: str = ""
    text: str = ""
    external: bool = False
    nofollow: bool = False
    sponsored: bool = False
    ugc: bool = False
    status_code: int = 0

    def __post_init__(self) -> None:
        if self.parsed_url is None:
            self.parsed_url = urlsplit(self.url)


@dataclass
class PageReport:
    """Everything recorded about one crawled URL."""

    id: int = 0
    url: str = ""
    parsed_url: SplitResult | None = None
    redirect_url: str = ""
    refresh: str = ""
    status_code: int = 0
    content_type: str = ""
    media_type: str = ""
    lang: str = ""
    title: str = ""
    description: str = ""
    robots: str = ""
    noindex: bool = False
    nofollow: bool = False
    canonical: str = ""
    h1: str = ""
    h2: str = ""
    links: list[Link] = field(default_factory=list)
    external_links: list[Link] = field(default_factory=list)
    words: int = 0
    hreflangs: list[Hreflang] = field(default_factory=list)
    size: int = 0
    images: list[Image] = field(default_factory=list)
    scripts: list[str] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)
    iframes: list[str] = field(default_factory=list)
    audios: list[str] = field(default_factory=list)
    videos: list[Video] = field(default_factory=list)
    blocked_by_robotstxt: bool = False
    crawled: bool = False
    in_sitemap: bool = False
    internal_links: list[InternalLink] = field(default_factory=list)
    depth: int = 0
    body_hash: str = ""
    timeout: bool = False
    ttfb: int = 0

    def __post_init__(self) -> None:
        if self.parsed_url is None:
            self.parsed_url = urlsplit(self.url)


@dataclass
class InternalLink:
    page_report: PageReport = field(default_factory=PageReport)
    link: Link = field(default_factory=Link)


@dataclass
class Issue:
    page_report_id: int = 0
    crawl_id: int = 0
    error_type: str = ""


@dataclass
class IssueGroup:
    error_type: str = ""
    priority: int = 0
    count: int = 0


@dataclass
class IssueCount:
    critical_issues: list[IssueGroup] = field(default_factory=list)
    alert_issues: list[IssueGroup] = field(default_factory=list)
    warning_issues: list[IssueGroup] = field(default_factory=list)


@dataclass
class Message:
    name: str = ""
    data: Any = None


@dataclass
class PageReportMessage:
    status_code: int = 0
    crawled: int = 0
    url: str = ""
    crawling: bool = False
    discovered: int = 0


@dataclass
class Paginator:
    current_page: int = 0
    next_page: int = 0
    previous_page: int = 0
    total_pages: int = 0


@dataclass
class PaginatorView:
    paginator: Paginator = field(default_factory=Paginator)
    page_reports: list[PageReport] = field(default_factory=list)


@dataclass
class Project:
    id: int = 0
    url: str = ""
    host: str = ""
    ignore_robotstxt: bool = False
    follow_nofollow: bool = False
    include_noindex: bool = False
    created: datetime | None = None
    crawl_sitemap: bool = False
    allow_subdomains: bool = False
    deleting: bool = False
    basic_auth: bool = False
    check_external_links: bool = False
    archive: bool = False


@dataclass
class ProjectView:
    project: Project = field(default_factory=Project)
    crawl: Crawl = field(default_factory=Crawl)


@dataclass
class ExplorerView:
    project_view: ProjectView | None = None
    term: str = ""
    paginator_view: PaginatorView = field(default_factory=PaginatorView)


@dataclass
class IssuesGroupView:
    project_view: ProjectView | None = None
    issue_count: IssueCount | None = None


@dataclass
class IssuesView:
    project_view: ProjectView | None = None
    eid: str = ""
    paginator_view: PaginatorView = field(default_factory=PaginatorView)


@dataclass
class CanonicalCount:
    canonical: int = 0
    non_canonical: int = 0


@dataclass
class SchemeCount:
    http: int = 0
    https: int = 0


@dataclass
class AltCount:
    alt: int = 0
    non_alt: int = 0


@dataclass
class StatusCodeByDepth:
    depth: int = 0
    status_code_100: int = 0
    status_code_200: int = 0
    status_code_300: int = 0
    status_code_400: int = 0
    status_code_500: int = 0


@dataclass
class PageReportView:
    page_report: PageReport = field(default_factory=PageReport)
    error_types: list[str] = field(default_factory=list)
    in_links: list[InternalLink] = field(default_factory=list)
    redirects: list[PageReport] = field(default_factory=list)
    paginator: Paginator = field(default_factory=Paginator)


@dataclass
class User:
    id: int = 0
    email: str = ""
    password: str = ""