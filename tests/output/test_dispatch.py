"""Tests for output dispatch."""

import logging

import msgspec
import pytest

from bibcite.convert.markup import render_fragment, strip_tags
from bibcite.core.exceptions import EngineError
from bibcite.core.models import Options
from bibcite.output.dispatch import format_output


class TestFormatOutput:
    """Test dispatch from resolved options to output."""

    def test_default_json(self, sample_entries):
        """Test parsed CSL-JSON by default."""
        assert format_output(sample_entries, Options()) == sample_entries

    def test_json_string(self, sample_entries):
        """Test CSL-JSON text in collection order."""
        result = format_output(
            sample_entries, Options(type="json", style="csl", format="string")
        )

        assert result.startswith('[{"id":"a"')
        assert result.index('"id":"a"') < result.index('"id":"b"')

    def test_result_is_a_copy(self, sample_entries):
        """Test that real output does not share state with the entries."""
        result = format_output(sample_entries, Options())
        result[0]["title"] = "Changed"

        assert sample_entries[0]["title"] == "X"

    def test_html_citation(self, sample_entries):
        """Test a rendered bibliography."""
        result = format_output(
            sample_entries,
            Options(type="html", style="citation-apa", format="string"),
        )

        assert result.index('data-csl-entry-id="b"') < result.index(
            'data-csl-entry-id="a"'
        )

    def test_html_rendered(self, sample_entries):
        """Test rendered nodes with a renderer."""
        nodes = format_output(
            sample_entries, Options(type="html", style="citation-apa"), render_fragment
        )

        assert len(nodes) == 1
        assert nodes[0]["class"] == ["csl-bib-body"]
        entries = nodes[0].find_all("div", class_="csl-entry")
        assert [e["data-csl-entry-id"] for e in entries] == ["b", "a"]

    @pytest.mark.parametrize(
        "style",
        [
            "citation-apa",
            "citation-chicago",
            "citation-harvard1",
            "citation-ieee",
            "citation-mla",
            "citation-vancouver",
        ],
    )
    def test_string_citation_composition(self, sample_entries, style):
        """Test that plain citations equal the stripped HTML bibliography."""
        text = format_output(
            sample_entries, Options(type="string", style=style, format="string")
        )
        html = format_output(
            sample_entries, Options(type="html", style=style, format="string")
        )

        assert text == strip_tags(html)

    def test_numbered_plain_text(self, sample_entries):
        """Test that numbers survive tag removal."""
        text = format_output(
            sample_entries, Options(type="string", style="citation-vancouver")
        )

        assert text.startswith("[1] Smith J. X.")
        assert "[2] Smith J. Y." in text

    def test_bibtex_json(self, sample_entries):
        """Test parsed BibTeX structures."""
        result = format_output(sample_entries, Options(type="json", style="bibtex"))
        assert [entry["label"] for entry in result] == ["a", "b"]

    def test_invalid_combination(self, sample_entries, caplog):
        """Test that invalid combinations are logged and produce None."""
        with caplog.at_level(logging.ERROR, logger="bibcite.output.dispatch"):
            result = format_output(
                sample_entries, Options(type="json", style="citation-apa")
            )

        assert result is None
        assert (
            "[get] Combination type/style of json/citation-* is not valid: "
            "json/citation-apa"
        ) in caplog.text

    def test_unknown_type(self, sample_entries, caplog):
        """Test that unknown types are logged and produce None."""
        with caplog.at_level(logging.ERROR, logger="bibcite.output.dispatch"):
            result = format_output(sample_entries, Options(type="xml"))

        assert result is None
        assert "[get] Invalid options" in caplog.text

    def test_engine_errors_propagate(self, sample_entries):
        """Test that engine failures are not swallowed."""
        with pytest.raises(EngineError):
            format_output(
                sample_entries, Options(type="html", style="citation-unknown")
            )

    def test_entries_untouched(self, sample_entries):
        """Test that formatting leaves the entries as they were."""
        before = msgspec.json.encode(sample_entries)

        for type, style in [("html", "citation-apa"), ("json", "bibtex")]:
            format_output(sample_entries, Options(type=type, style=style))

        assert msgspec.json.encode(sample_entries) == before

    def test_empty(self):
        """Test an empty collection."""
        assert format_output([], Options(format="string")) == "[]"
