"""Citation engine, style templates and locales.

This module provides the bibliography engine used for ``citation-*``
styles, together with the built-in style templates, locales and the
item lookup the engine reads entry data through.
"""

from bibcite.citations.engine import (
    CitationEngine,
    fetch_engine,
)
from bibcite.citations.formatters import (
    AuthorFormatter,
    DateFormatter,
    TitleFormatter,
    format_ordinal,
)
from bibcite.citations.items import fetch_item_callback
from bibcite.citations.locales import (
    fetch_locale,
    list_locales,
)
from bibcite.citations.models import (
    BibliographyParams,
    Locale,
    Part,
    StyleTemplate,
)
from bibcite.citations.styles import (
    StyleRegistry,
    fetch_style,
    get_style_registry,
)

__all__ = [
    # Engine
    "CitationEngine",
    "fetch_engine",
    "BibliographyParams",
    # Templates and locales
    "StyleTemplate",
    "Part",
    "Locale",
    "StyleRegistry",
    "get_style_registry",
    "fetch_style",
    "fetch_locale",
    "list_locales",
    # Items
    "fetch_item_callback",
    # Formatters
    "AuthorFormatter",
    "DateFormatter",
    "TitleFormatter",
    "format_ordinal",
]
