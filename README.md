# seocheck

Page-level SEO issue checks for pages collected by a web crawler.

Each check is a `PageIssueReporter`: a frozen dataclass holding an
`error_type` (a member of the `ErrorType` enum) and a `callback`. Calling the
reporter with a `PageReport`, the parsed HTML document and the response
headers returns `True` when the page has that issue. The document and the
headers may be omitted or `None`; checks that need them then find nothing.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Usage

```python
from seocheck.models import PageReport, Hreflang
from seocheck.issues import parse_html
from seocheck.checks.hreflangs import hreflang_x_default_missing
from seocheck.checks.security import missing_hsts_header_reporter

report = PageReport(
    url="http://example.com",
    crawled=True,
    media_type="text/html",
    status_code=200,
    hreflangs=[Hreflang(url="http://example.com/fr", lang="fr")],
)
document = parse_html("<html><head></head><body></body></html>")

reporter = hreflang_x_default_missing()
print(reporter.error_type, reporter(report, document, {}))  # ... True

hsts = missing_hsts_header_reporter()
print(hsts(report, document, {"strict-transport-security": "max-age=31536000"}))  # False
```

`PageReport` and `Link` fill in `parsed_url` with `urllib.parse.urlsplit(url)`
when it is not given.

## Helpers in `seocheck.issues`

- `parse_html(source)` parses a `str` or `bytes` document with lxml and always
  returns an `html` root element that has a `head` and a `body`, even for
  empty input.
- `query_all(document, xpath)` returns the nodes an XPath expression selects,
  an empty list for a `None` document, and raises `ValueError` for an invalid
  expression or one that does not select nodes.
- `header_value(headers, name)` looks a header up case-insensitively in any
  mapping whose values are strings or sequences of strings, returning the
  first value or `""`.
- `MultipageIssueReporter` pairs an iterable of page report ids with an
  `ErrorType`; `page_report_ids()` yields the ids.

## Available checks

The checks live in the modules of `seocheck.checks`; each function returns a
new `PageIssueReporter`.

- `status`: `status_30x_reporter`, `status_40x_reporter`, `status_50x_reporter`
- `title`: `empty_title_reporter`, `short_title_reporter` (under 20 bytes),
  `long_title_reporter` (over 60 bytes), `multiple_title_tags_reporter`
- `indexability`: `no_indexable_reporter`, `blocked_by_robotstxt_reporter`,
  `no_index_in_sitemap_reporter`, `sitemap_and_blocked_reporter`,
  `non_canonical_in_sitemap_reporter`, `metas_in_body_reporter`,
  `nosnippet_reporter` (also matches `max-snippet:0`)
- `links`: `too_many_links_reporter` (over 100), `internal_nofollow_links_reporter`,
  `external_link_without_nofollow_reporter`, `http_links_reporter`,
  `deadend_reporter`, `external_link_redirect_reporter`,
  `external_link_broken_reporter`
- `images`: `alt_text_reporter`, `long_alt_text_reporter` (over 100 characters),
  `large_image_reporter` (over 500,000 bytes), `no_image_index_reporter`,
  `missing_img_tag_in_picture_reporter`, `img_without_size_reporter`
- `language`: `invalid_lang_reporter`, `missing_lang_reporter`, and
  `is_valid_language_tag(tag)`, a well-formedness test for BCP 47 tags
- `hreflangs`: `hreflang_x_default_missing`, `hreflang_missing_self_reference`,
  `hreflang_mismatching_lang`, `hreflang_relative_url`
- `scheme`: `http_scheme_reporter`
- `security`: `missing_hsts_header_reporter`, `missing_csp_reporter`,
  `missing_content_type_options_reporter`
- `timeout`: `timeout_reporter`
- `ttfb`: `slow_ttfb_reporter` (over 800 ms)
- `url`: `underscore_url_reporter`, `space_url_reporter`, `multiple_slashes_reporter`

## Models

`seocheck.models` holds the dataclasses that describe crawls, projects, page
reports, links, images, issues and the view records built from them, plus
`sort_counts(items)`, which orders `CountItem`s by ascending value and keeps
ties in input order.

## What this package does not do

It does not crawl sites, fetch pages or parse robots.txt and sitemaps: the
`PageReport`, document and headers must be supplied by the caller. It has no
database storage, no web interface and no command-line program, and it does
not run the checks over a crawl or record the issues they find.