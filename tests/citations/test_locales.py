"""Tests for built-in locales."""

import msgspec
import pytest

from bibcite.citations.locales import (
    DEFAULT_TERMS,
    LOCALES,
    fetch_locale,
    list_locales,
    resolve_lang,
)
from bibcite.citations.models import Locale


class TestResolveLang:
    """Test mapping of language tags to locales."""

    @pytest.mark.parametrize(
        "lang,expected",
        [
            ("en-US", "en-US"),
            ("en-gb", "en-GB"),
            ("de", "de-DE"),
            ("fr-CA", "fr-FR"),
            ("en-AU", "en-US"),
            ("pt-BR", None),
            ("", None),
        ],
    )
    def test_resolve(self, lang, expected):
        assert resolve_lang(lang) == expected


class TestFetchLocale:
    """Test locale data for the citation engine."""

    @pytest.mark.parametrize("lang", list(LOCALES))
    def test_locales_decode(self, lang):
        """Test that every built-in locale is valid locale data."""
        locale = msgspec.json.decode(fetch_locale(lang), type=Locale)

        assert locale.lang == lang
        assert len(locale.months) == 12
        assert set(DEFAULT_TERMS) <= set(locale.terms)

    def test_unknown(self):
        """Test unavailable languages."""
        assert fetch_locale("xx-XX") is None

    def test_list_locales(self):
        """Test listing locale names."""
        assert "en-US" in list_locales()
        assert "de-DE" in list_locales()
