"""Converters from CSL-JSON entries to output representations.

This module provides CSL-JSON serialization, BibTeX text and BibTeX-JSON
conversion, and the markup helpers used for HTML output.
"""

from .bibtex import (
    BibtexEncoder,
    get_bibtex,
    get_bibtex_json,
)
from .json import (
    get_json,
)
from .markup import (
    render_fragment,
    strip_tags,
)

__all__ = [
    # JSON
    "get_json",
    # BibTeX
    "BibtexEncoder",
    "get_bibtex",
    "get_bibtex_json",
    # Markup
    "strip_tags",
    "render_fragment",
]
