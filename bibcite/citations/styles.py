"""Built-in citation style templates.

Templates are JSON documents describing how the citation engine sorts and
lays out bibliography entries. Affixes may reference locale terms with
``{term}`` placeholders, e.g. ``"prefix": "{volume} "``.
"""

import logging
from typing import Any

import msgspec

logger = logging.getLogger(__name__)

_BOOKISH = ["book", "report", "thesis", "webpage"]
_IN_CONTAINER = ["chapter", "paper-conference"]

APA = {
    "info": {
        "id": "apa",
        "title": "American Psychological Association 7th edition",
        "citation-format": "author-date",
    },
    "bibliography": {
        "sort": [{"key": "author"}, {"key": "issued"}, {"key": "title"}],
        "hanging-indent": True,
        "entry-spacing": 0,
        "line-spacing": 2,
        "layout": {"suffix": ".", "delimiter": ". "},
        "parts": [
            {
                "variable": "author",
                "name-as-sort-order": "all",
                "and": "symbol",
                "et-al-min": 21,
                "et-al-use-first": 19,
            },
            {"variable": "issued", "prefix": "(", "suffix": ")"},
            {"variable": "title", "font-style": "italic", "types": _BOOKISH},
            {"variable": "title", "exclude-types": _BOOKISH},
            {
                "parts": [
                    {"variable": "container-title", "font-style": "italic"},
                    {
                        "parts": [
                            {"variable": "volume", "font-style": "italic"},
                            {"variable": "issue", "prefix": "(", "suffix": ")"},
                        ],
                        "delimiter": "",
                    },
                    {"variable": "page"},
                ],
                "delimiter": ", ",
                "exclude-types": _BOOKISH + _IN_CONTAINER,
            },
            {
                "parts": [
                    {"variable": "container-title", "font-style": "italic"},
                    {"variable": "page", "prefix": "({pages} ", "suffix": ")"},
                ],
                "delimiter": " ",
                "prefix": "{in} ",
                "types": _IN_CONTAINER,
            },
            {
                "variable": "edition",
                "prefix": "(",
                "suffix": " {edition})",
                "types": ["book"],
            },
            {"variable": "publisher", "types": _BOOKISH + _IN_CONTAINER},
            {
                "parts": [
                    {"variable": "DOI", "prefix": "https://doi.org/"},
                    {"variable": "URL"},
                ],
                "substitute": True,
            },
        ],
    },
}

HARVARD1 = {
    "info": {"id": "harvard1", "title": "Harvard reference format 1"},
    "bibliography": {
        "sort": [{"key": "author"}, {"key": "issued"}],
        "hanging-indent": True,
        "layout": {"suffix": ".", "delimiter": ". "},
        "parts": [
            {
                "parts": [
                    {
                        "variable": "author",
                        "name-as-sort-order": "all",
                        "delimiter-precedes-last": False,
                    },
                    {"variable": "issued", "prefix": "(", "suffix": ")"},
                ],
                "delimiter": " ",
            },
            {"variable": "title", "font-style": "italic", "types": _BOOKISH},
            {"variable": "title", "exclude-types": _BOOKISH},
            {
                "parts": [
                    {"variable": "container-title", "font-style": "italic"},
                    {
                        "parts": [
                            {"variable": "volume"},
                            {"variable": "issue", "prefix": "(", "suffix": ")"},
                        ],
                        "delimiter": "",
                    },
                    {"variable": "page", "prefix": "{pages} "},
                ],
                "delimiter": ", ",
                "exclude-types": _BOOKISH,
            },
            {
                "parts": [
                    {"variable": "publisher-place"},
                    {"variable": "publisher"},
                ],
                "delimiter": ": ",
                "types": _BOOKISH,
            },
            {"variable": "URL", "prefix": "{available} "},
        ],
    },
}

VANCOUVER = {
    "info": {
        "id": "vancouver",
        "title": "Vancouver",
        "citation-format": "numeric",
    },
    "bibliography": {
        "layout": {"suffix": ".", "delimiter": ". "},
        "parts": [
            {
                "variable": "author",
                "name-as-sort-order": "all",
                "initialize-with": "",
                "sort-separator": " ",
                "and": "",
                "et-al-min": 7,
                "et-al-use-first": 6,
            },
            {"variable": "title"},
            {"variable": "container-title", "exclude-types": _IN_CONTAINER},
            {
                "variable": "container-title",
                "prefix": "{in}: ",
                "types": _IN_CONTAINER,
            },
            {
                "parts": [
                    {"variable": "publisher-place"},
                    {"variable": "publisher"},
                ],
                "delimiter": ": ",
                "types": _BOOKISH + _IN_CONTAINER,
            },
            {
                "parts": [
                    {"variable": "issued"},
                    {"variable": "volume", "prefix": ";"},
                    {"variable": "issue", "prefix": "(", "suffix": ")"},
                    {"variable": "page", "prefix": ":"},
                ],
                "delimiter": "",
            },
            {"variable": "DOI", "prefix": "doi:"},
        ],
    },
}

IEEE = {
    "info": {"id": "ieee", "title": "IEEE", "citation-format": "numeric"},
    "bibliography": {
        "layout": {"suffix": ".", "delimiter": ", "},
        "parts": [
            {"variable": "author", "et-al-min": 7, "et-al-use-first": 1},
            {"variable": "title", "quotes": True, "exclude-types": _BOOKISH},
            {"variable": "title", "font-style": "italic", "types": _BOOKISH},
            {
                "variable": "container-title",
                "font-style": "italic",
                "exclude-types": _IN_CONTAINER,
            },
            {
                "variable": "container-title",
                "font-style": "italic",
                "prefix": "{in} ",
                "types": _IN_CONTAINER,
            },
            {"variable": "volume", "prefix": "{volume} "},
            {"variable": "issue", "prefix": "{issue} "},
            {"variable": "page", "prefix": "{pages} "},
            {"variable": "publisher", "types": _BOOKISH},
            {"variable": "issued", "date-form": "year"},
            {"variable": "DOI", "prefix": "doi: "},
        ],
    },
}

MLA = {
    "info": {"id": "mla", "title": "Modern Language Association 9th edition"},
    "bibliography": {
        "sort": [{"key": "author"}, {"key": "title"}],
        "hanging-indent": True,
        "layout": {"suffix": ".", "delimiter": ". "},
        "parts": [
            {
                "variable": "author",
                "name-as-sort-order": "first",
                "initialize": False,
                "et-al-min": 3,
                "et-al-use-first": 1,
            },
            {"variable": "title", "quotes": True, "exclude-types": _BOOKISH},
            {
                "variable": "title",
                "font-style": "italic",
                "text-case": "title",
                "types": _BOOKISH,
            },
            {
                "parts": [
                    {"variable": "container-title", "font-style": "italic"},
                    {"variable": "edition", "suffix": " {edition}"},
                    {"variable": "volume", "prefix": "{volume} "},
                    {"variable": "issue", "prefix": "{issue} "},
                    {"variable": "publisher"},
                    {"variable": "issued"},
                    {"variable": "page", "prefix": "{pages} "},
                ],
                "delimiter": ", ",
            },
        ],
    },
}

CHICAGO = {
    "info": {
        "id": "chicago",
        "title": "Chicago Manual of Style 17th edition (author-date)",
    },
    "bibliography": {
        "sort": [{"key": "author"}, {"key": "issued"}],
        "hanging-indent": True,
        "layout": {"suffix": ".", "delimiter": ". "},
        "parts": [
            {
                "variable": "author",
                "name-as-sort-order": "first",
                "initialize": False,
                "et-al-min": 11,
                "et-al-use-first": 7,
            },
            {"variable": "issued"},
            {"variable": "title", "quotes": True, "exclude-types": _BOOKISH},
            {"variable": "title", "font-style": "italic", "types": _BOOKISH},
            {
                "parts": [
                    {"variable": "container-title", "font-style": "italic"},
                    {
                        "parts": [
                            {"variable": "volume"},
                            {"variable": "issue", "prefix": "{issue} "},
                        ],
                        "delimiter": ", ",
                        "prefix": " ",
                    },
                    {"variable": "page", "prefix": ": "},
                ],
                "delimiter": "",
            },
            {
                "parts": [
                    {"variable": "publisher-place"},
                    {"variable": "publisher"},
                ],
                "delimiter": ": ",
                "types": _BOOKISH + _IN_CONTAINER,
            },
            {"variable": "DOI", "prefix": "https://doi.org/"},
        ],
    },
}


class StyleRegistry:
    """Registry of available style templates."""

    def __init__(self):
        """Initialize with built-in styles."""
        self._styles: dict[str, dict[str, Any] | str] = {
            "apa": APA,
            "chicago": CHICAGO,
            "harvard1": HARVARD1,
            "ieee": IEEE,
            "mla": MLA,
            "vancouver": VANCOUVER,
        }

        # Aliases
        self._aliases = {
            "apa7": "apa",
            "mla9": "mla",
            "chicago-author-date": "chicago",
            "harvard": "harvard1",
        }

    def __contains__(self, name: str) -> bool:
        """Check if style is registered."""
        name = name.lower()
        return name in self._styles or name in self._aliases

    def get(self, name: str) -> str | None:
        """Get a style template as JSON text, None if unknown."""
        name = name.lower()

        # Check aliases
        name = self._aliases.get(name, name)

        template = self._styles.get(name)
        if template is None:
            return None
        if isinstance(template, str):
            return template
        return msgspec.json.encode(template).decode("utf-8")

    def register(self, name: str, template: dict[str, Any] | str) -> None:
        """Register a custom style template."""
        self._styles[name.lower()] = template

    def list_styles(self, detailed: bool = False) -> list[str] | list[dict]:
        """List available styles."""
        if not detailed:
            return list(self._styles.keys())

        result = []
        for name in self._styles:
            info = msgspec.json.decode(self.get(name) or "{}").get("info", {})
            result.append(
                {
                    "id": name,
                    "title": info.get("title", name),
                    "citation-format": info.get("citation-format", "author-date"),
                }
            )
        return result


_registry = StyleRegistry()


def get_style_registry() -> StyleRegistry:
    """Get the shared style registry."""
    return _registry


def fetch_style(name: str) -> str | None:
    """Get a built-in or registered style template by name.

    Args:
        name: Style name, e.g. ``apa`` or ``vancouver``.

    Returns:
        Template JSON, or None if no such style exists.
    """
    template = _registry.get(name) if name else None
    if template is None:
        logger.debug(f"Style template not found: {name!r}")
    return template
