"""Tests for core data models and exceptions."""

import pytest

from bibcite.core.exceptions import (
    BibciteError,
    EngineError,
    InvalidCombinationError,
    ItemNotFoundError,
    MaterializationError,
)
from bibcite.core.models import BibliographyResult, OutputFormat, OutputType, StyleKind
from bibcite.core.snapshot import snapshot


class TestEnums:
    """Test option value enumerations."""

    def test_values(self):
        """Test the closed sets of values."""
        assert {f.value for f in OutputFormat} == {"real", "string"}
        assert {t.value for t in OutputType} == {"string", "html", "json"}
        assert {s.value for s in StyleKind} == {"csl", "bibtex", "citation"}

    def test_unknown_value(self):
        """Test that unknown values are rejected."""
        with pytest.raises(ValueError):
            OutputType("xml")


class TestBibliographyResult:
    """Test bibliography results."""

    def test_render(self):
        """Test joining entries inside the wrapper."""
        result = BibliographyResult(
            wrapper_start="<div>",
            wrapper_end="</div>",
            entries=("<p>1</p>", "<p>2</p>"),
            sorted_ids=("a", "b"),
        )

        assert result.render() == "<div><p>1</p><br /><p>2</p></div>"
        assert result.render("\n") == "<div><p>1</p>\n<p>2</p></div>"

    def test_empty(self):
        """Test an empty bibliography."""
        result = BibliographyResult(
            wrapper_start="<div>", wrapper_end="</div>", entries=(), sorted_ids=()
        )
        assert result.render() == "<div></div>"

    def test_length_mismatch(self):
        """Test that every entry needs an ID."""
        with pytest.raises(ValueError, match="2 entries but 1 sorted IDs"):
            BibliographyResult(
                wrapper_start="",
                wrapper_end="",
                entries=("x", "y"),
                sorted_ids=("a",),
            )


class TestSnapshot:
    """Test deep-copy snapshots."""

    def test_independent_copy(self):
        """Test that changes to the snapshot do not reach the original."""
        original = [{"id": "a", "author": [{"family": "Smith"}]}]
        copy = snapshot(original)

        copy[0]["author"][0]["family"] = "Jones"
        copy.append({"id": "b"})

        assert original == [{"id": "a", "author": [{"family": "Smith"}]}]

    def test_accepts_iterables(self):
        """Test snapshots of non-list iterables."""
        assert snapshot(e for e in [{"id": "a"}]) == [{"id": "a"}]


class TestExceptions:
    """Test the exception hierarchy."""

    def test_invalid_combination(self):
        """Test invalid combination errors."""
        error = InvalidCombinationError("json", "citation-apa")

        assert isinstance(error, BibciteError)
        assert isinstance(error, ValueError)
        assert str(error) == "Invalid options"
        assert error.type == "json"
        assert error.style == "citation-apa"

    def test_invalid_combination_message(self):
        """Test a custom message."""
        error = InvalidCombinationError("json", "citation-apa", "Not valid")
        assert str(error) == "Not valid"

    def test_item_not_found(self):
        """Test missing item errors."""
        error = ItemNotFoundError("missing")

        assert isinstance(error, EngineError)
        assert isinstance(error, KeyError)
        assert error.item_id == "missing"
        assert str(error) == "Item not found: missing"

    def test_materialization_error(self):
        """Test materialization errors share the base class."""
        assert issubclass(MaterializationError, BibciteError)
