"""Tests for turning pipeline output into live values."""

from unittest.mock import Mock

import pytest

from bibcite.core.exceptions import MaterializationError
from bibcite.core.models import Options
from bibcite.output.materialize import materialize


class TestMaterialize:
    """Test format handling."""

    def test_json_parsed(self):
        """Test that real JSON output is parsed."""
        result = materialize('[{"id":"a"}]', Options(type="json"))
        assert result == [{"id": "a"}]

    def test_json_string(self):
        """Test that string format keeps JSON text."""
        result = materialize('[{"id":"a"}]', Options(type="json", format="string"))
        assert result == '[{"id":"a"}]'

    def test_malformed_json(self):
        """Test that unparseable JSON raises."""
        with pytest.raises(MaterializationError, match="Malformed JSON output"):
            materialize("[{", Options(type="json"))

    def test_html_rendered(self):
        """Test that real HTML output goes through the renderer."""
        renderer = Mock(return_value=["node"])

        result = materialize("<div>x</div>", Options(type="html"), renderer)

        renderer.assert_called_once_with("<div>x</div>")
        assert result == ["node"]

    def test_html_without_renderer(self):
        """Test that HTML stays text when no renderer is available."""
        assert materialize("<div>x</div>", Options(type="html")) == "<div>x</div>"

    def test_html_string(self):
        """Test that string format skips the renderer."""
        renderer = Mock()

        result = materialize(
            "<div>x</div>", Options(type="html", format="string"), renderer
        )

        renderer.assert_not_called()
        assert result == "<div>x</div>"

    def test_string_type(self):
        """Test that string output is returned as-is."""
        renderer = Mock()

        assert materialize("text", Options(type="string"), renderer) == "text"
        renderer.assert_not_called()

    def test_none(self):
        """Test that missing output stays missing."""
        assert materialize(None, Options(type="json")) is None
