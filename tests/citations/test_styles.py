"""Tests for built-in style templates and the style registry."""

import msgspec
import pytest

from bibcite.citations.models import StyleTemplate
from bibcite.citations.styles import StyleRegistry, fetch_style, get_style_registry

BUILTIN_STYLES = ["apa", "chicago", "harvard1", "ieee", "mla", "vancouver"]


class TestBuiltinStyles:
    """Test the templates shipped with the package."""

    @pytest.mark.parametrize("name", BUILTIN_STYLES)
    def test_templates_decode(self, name):
        """Test that every built-in template is a valid style template."""
        template = msgspec.json.decode(fetch_style(name), type=StyleTemplate)

        assert template.info.id == name
        assert template.bibliography.parts

    def test_numeric_styles(self):
        """Test which styles use citation numbers."""
        numeric = {
            name
            for name in BUILTIN_STYLES
            if msgspec.json.decode(fetch_style(name), type=StyleTemplate).is_numeric
        }
        assert numeric == {"ieee", "vancouver"}


class TestStyleRegistry:
    """Test style lookup and registration."""

    def test_contains(self):
        """Test membership including aliases."""
        registry = StyleRegistry()

        assert "apa" in registry
        assert "APA7" in registry
        assert "unknown" not in registry

    def test_aliases(self):
        """Test that aliases resolve to the same template."""
        registry = StyleRegistry()

        assert registry.get("apa7") == registry.get("apa")
        assert registry.get("harvard") == registry.get("harvard1")
        assert registry.get("chicago-author-date") == registry.get("chicago")

    def test_unknown(self):
        """Test unknown style names."""
        assert StyleRegistry().get("unknown") is None

    def test_register(self):
        """Test registering a custom template."""
        registry = StyleRegistry()
        registry.register("Mine", {"info": {"id": "mine"}, "bibliography": {}})

        assert "mine" in registry
        assert msgspec.json.decode(registry.get("mine"))["info"]["id"] == "mine"

    def test_register_text(self):
        """Test registering template JSON as text."""
        registry = StyleRegistry()
        registry.register("raw", '{"info": {"id": "raw"}}')

        assert registry.get("raw") == '{"info": {"id": "raw"}}'

    def test_list_styles(self):
        """Test listing styles."""
        assert sorted(StyleRegistry().list_styles()) == BUILTIN_STYLES

    def test_list_styles_detailed(self):
        """Test detailed style listing."""
        styles = {s["id"]: s for s in StyleRegistry().list_styles(detailed=True)}

        assert styles["vancouver"]["citation-format"] == "numeric"
        assert styles["apa"]["citation-format"] == "author-date"
        assert "American Psychological Association" in styles["apa"]["title"]

    def test_shared_registry(self):
        """Test the module-level registry."""
        assert get_style_registry() is get_style_registry()


class TestFetchStyle:
    """Test style lookup for the citation engine."""

    def test_found(self):
        assert fetch_style("ieee") is not None

    def test_not_found(self):
        assert fetch_style("unknown") is None

    def test_empty_name(self):
        assert fetch_style("") is None
