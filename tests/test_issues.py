import pytest

from seocheck.issues import (
    ErrorType,
    MultipageIssueReporter,
    PageIssueReporter,
    header_value,
    parse_html,
    query_all,
)
from seocheck.models import PageReport


def test_error_type_round_trip():
    for member in ErrorType:
        assert ErrorType(member.value) is member
        assert member.value == member.name.lower()


def test_page_issue_reporter_calls_callback():
    reporter = PageIssueReporter(
        error_type=ErrorType.TIMEOUT,
        callback=lambda report, document, headers: report.timeout,
    )
    assert reporter(PageReport(timeout=True), None, {}) is True
    assert reporter(PageReport()) is False
    assert reporter.error_type is ErrorType.TIMEOUT


def test_page_issue_reporter_passes_document_and_headers():
    seen = []

    def check(report, document, headers):
        seen.append((document, headers))
        return False

    reporter = PageIssueReporter(ErrorType.MISSING_CSP, check)
    doc = parse_html("<html></html>")
    headers = {"X-Test": "1"}
    assert reporter(PageReport(), doc, headers) is False
    assert seen == [(doc, headers)]


def test_multipage_reporter_yields_ids():
    reporter = MultipageIssueReporter(
        pstream=(i for i in (4, 8, 15)), error_type=ErrorType.DEADEND
    )
    assert list(reporter.page_report_ids()) == [4, 8, 15]


def test_parse_empty_source_has_head_and_body():
    doc = parse_html("")
    assert [child.tag for child in doc] == ["head", "body"]
    assert len(query_all(doc, "//head")) == 1
    assert len(query_all(doc, "//body")) == 1


def test_parse_adds_missing_head():
    doc = parse_html("<html><body><p>x</p></body></html>")
    assert len(query_all(doc, "//head")) == 1
    assert len(query_all(doc, "//body/p")) == 1


def test_query_all_counts_titles():
    source = (
        "<html><head><title>Title 1</title><title>Title 1</title></head>"
        "<body></body></html>"
    )
    titles = query_all(parse_html(source), "//head/title")
    assert len(titles) == 2
    assert all(t.text == "Title 1" for t in titles)


def test_query_all_attributes_from_bytes():
    doc = parse_html(b'<html><head><link rel="alternate" href="/am"></head></html>')
    links = query_all(doc, '//head/link[@rel="alternate"]')
    assert [link.get("href") for link in links] == ["/am"]


def test_query_all_without_document():
    assert query_all(None, "//img") == []


def test_query_all_invalid_expression():
    with pytest.raises(ValueError):
        query_all(parse_html("<html></html>"), "//[")


def test_header_value_is_case_insensitive():
    headers = {"Content-Security-Policy": "default-src 'self'"}
    assert header_value(headers, "content-security-policy") == "default-src 'self'"
    assert header_value(headers, "X-Content-Type-Options") == ""


def test_header_value_takes_first_of_many():
    headers = {"x-content-type-options": ["nosniff", "other"]}
    assert header_value(headers, "X-Content-Type-Options") == "nosniff"
    assert header_value({"a": []}, "A") == ""
    assert header_value(None, "A") == ""