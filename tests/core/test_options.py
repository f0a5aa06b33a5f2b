"""Tests for output option resolution."""

import logging

import pytest

from bibcite.core.models import Options
from bibcite.core.options import (
    DEFAULT_OPTIONS,
    OPTION_KEYS,
    merge_options,
    resolve_options,
)


class TestMergeOptions:
    """Test merging of option mappings."""

    def test_later_sources_win(self):
        """Test that later sources take precedence."""
        merged = merge_options({"type": "html"}, {"type": "string"})
        assert merged == {"type": "string"}

    def test_missing_sources_skipped(self):
        """Test that None and empty sources are ignored."""
        merged = merge_options(None, {"style": "bibtex"}, {}, None)
        assert merged == {"style": "bibtex"}

    def test_none_values_skipped(self):
        """Test that None values do not override earlier values."""
        merged = merge_options({"lang": "de-DE"}, {"lang": None})
        assert merged == {"lang": "de-DE"}

    def test_unknown_keys_dropped(self, caplog):
        """Test that keys that are not output options are dropped."""
        with caplog.at_level(logging.DEBUG, logger="bibcite.core.options"):
            merged = merge_options({"type": "html", "colour": "red"})

        assert merged == {"type": "html"}
        assert "colour" in caplog.text


class TestResolveOptions:
    """Test resolution of defaults, instance and call options."""

    def test_defaults(self):
        """Test resolution with nothing given."""
        options = resolve_options()

        assert options == Options()
        assert options.format == DEFAULT_OPTIONS["format"] == "real"
        assert options.type == "json"
        assert options.style == "csl"
        assert options.lang == "en-US"
        assert options.locale == ""
        assert options.template == ""

    def test_instance_overrides_defaults(self):
        """Test that instance options replace defaults."""
        options = resolve_options({"style": "bibtex", "type": "string"})

        assert options.style == "bibtex"
        assert options.type == "string"
        assert options.format == "real"

    def test_call_overrides_instance(self):
        """Test that call options replace instance options."""
        options = resolve_options(
            {"style": "bibtex", "lang": "de-DE"},
            {"style": "citation-apa"},
        )

        assert options.style == "citation-apa"
        assert options.lang == "de-DE"

    def test_instance_locale_and_template_cleared(self):
        """Test that locale and template only come from the call."""
        options = resolve_options({"locale": "<locale/>", "template": "<style/>"})

        assert options.locale == ""
        assert options.template == ""

    def test_call_locale_and_template_kept(self):
        """Test that call-level locale and template are used."""
        options = resolve_options(
            {"template": "instance"},
            {"locale": "call-locale", "template": "call-template"},
        )

        assert options.locale == "call-locale"
        assert options.template == "call-template"

    def test_values_coerced_to_strings(self):
        """Test that option values become strings."""
        options = resolve_options(call={"lang": 42})
        assert options.lang == "42"

    def test_unknown_values_kept_for_selector(self):
        """Test that invalid types and styles survive resolution."""
        options = resolve_options(call={"type": "xml", "style": "ris"})

        assert options.type == "xml"
        assert options.style == "ris"

    def test_option_keys(self):
        """Test the set of recognised option names."""
        assert OPTION_KEYS == {"format", "type", "style", "lang", "locale", "template"}


class TestOptions:
    """Test the resolved options struct."""

    @pytest.mark.parametrize(
        "style,kind,fmt",
        [
            ("csl", "csl", ""),
            ("bibtex", "bibtex", ""),
            ("citation-apa", "citation", "apa"),
            ("citation-chicago-author-date", "citation", "chicago-author-date"),
            ("citation", "citation", ""),
        ],
    )
    def test_style_decomposition(self, style, kind, fmt):
        """Test splitting a style into kind and format."""
        options = Options(style=style)

        assert options.style_kind == kind
        assert options.style_format == fmt

    def test_is_real(self):
        """Test format detection."""
        assert Options().is_real is True
        assert Options(format="string").is_real is False

    def test_frozen(self):
        """Test that resolved options cannot be changed."""
        options = Options()
        with pytest.raises(AttributeError):
            options.type = "html"
