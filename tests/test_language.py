import pytest

from seocheck.checks.language import (
    invalid_lang_reporter,
    is_valid_language_tag,
    missing_lang_reporter,
)
from seocheck.issues import ErrorType
from seocheck.models import PageReport


@pytest.mark.parametrize(
    "factory, error_type",
    [(invalid_lang_reporter, ErrorType.INVALID_LANGUAGE), (missing_lang_reporter, ErrorType.NO_LANG)],
)
def test_error_types(factory, error_type):
    assert factory().error_type is error_type


@pytest.mark.parametrize(
    "factory, lang, status_code, expected",
    [
        pytest.param(invalid_lang_reporter, "en", 0, False, id="invalid-valid-lang"),
        pytest.param(invalid_lang_reporter, "InvalidLangCode", 0, True, id="invalid-bad-lang"),
        pytest.param(invalid_lang_reporter, "InvalidLangCode", 301, False, id="invalid-redirect"),
        pytest.param(invalid_lang_reporter, "en,InvalidLangCode", 0, True, id="invalid-list"),
        pytest.param(missing_lang_reporter, "en", 0, False, id="missing-present"),
        pytest.param(missing_lang_reporter, "", 301, False, id="missing-redirect"),
        pytest.param(missing_lang_reporter, "", 0, True, id="missing-empty"),
    ],
)
def test_reporters(factory, lang, status_code, expected):
    page_report = PageReport(
        crawled=True, media_type="text/html", lang=lang, status_code=status_code
    )
    assert factory()(page_report, None, {}) is expected


@pytest.mark.parametrize(
    "tag, expected",
    [
        *((tag, True) for tag in
          ["en", "en-US", "EN-us", "en_GB", "zh-Hant-TW", "es-419", "de-CH-1996", "x-private"]),
        *((tag, False) for tag in ["", "InvalidLangCode", "e", "en-", "en--US", "123"]),
    ],
)
def test_is_valid_language_tag(tag, expected):
    assert is_valid_language_tag(tag) is expected