"""Formatting pipelines and their selection.

Each pipeline turns a snapshot of the entries into text. Which pipeline runs
is decided by the requested output type and the kind of the style:

============  ==========  ============================================
type          style kind  output
============  ==========  ============================================
html          citation    rendered bibliography
html          csl         indented CSL-JSON in <pre>
html          bibtex      BibTeX as HTML
string        citation    rendered bibliography without markup
string        csl         CSL-JSON
string        bibtex      BibTeX text
json          csl         CSL-JSON
json          bibtex      JSON list of BibTeX structures
json          citation    invalid
============  ==========  ============================================
"""

import html
from collections.abc import Callable
from typing import Any

from bibcite.convert.bibtex import get_bibtex, get_bibtex_json
from bibcite.convert.json import get_json
from bibcite.convert.markup import strip_tags
from bibcite.core.exceptions import InvalidCombinationError
from bibcite.core.models import Options, OutputType, StyleKind

from .bibliography import get_bibliography_html

Pipeline = Callable[[list[dict[str, Any]], Options], str]


def html_citation(data: list[dict[str, Any]], options: Options) -> str:
    return get_bibliography_html(data, options)


def html_csl(data: list[dict[str, Any]], options: Options) -> str:
    """Indented CSL-JSON, HTML-escaped inside a ``<pre>`` block."""
    return "<pre>" + html.escape(get_json(data, indent=2), quote=False) + "</pre>"


def html_bibtex(data: list[dict[str, Any]], options: Options) -> str:
    return get_bibtex(data, html=True)


def string_citation(data: list[dict[str, Any]], options: Options) -> str:
    """Bibliography as plain text: the HTML bibliography with tags removed."""
    return strip_tags(html_citation(data, options))


def string_bibtex(data: list[dict[str, Any]], options: Options) -> str:
    return get_bibtex(data, html=False)


def csl_json(data: list[dict[str, Any]], options: Options) -> str:
    return get_json(data)


def bibtex_json(data: list[dict[str, Any]], options: Options) -> str:
    return get_json([get_bibtex_json(entry) for entry in data])


def select_pipeline(options: Options) -> Pipeline:
    """Pick the pipeline for the requested type and style.

    Args:
        options: Resolved options.

    Returns:
        Pipeline producing the output text.

    Raises:
        InvalidCombinationError: If the type or style kind is unknown, or
            the combination has no output.
    """
    try:
        output_type = OutputType(options.type)
        style_kind = StyleKind(options.style_kind)
    except ValueError:
        raise InvalidCombinationError(options.type, options.style) from None

    match output_type, style_kind:
        case OutputType.HTML, StyleKind.CITATION:
            return html_citation
        case OutputType.HTML, StyleKind.CSL:
            return html_csl
        case OutputType.HTML, StyleKind.BIBTEX:
            return html_bibtex
        case OutputType.STRING, StyleKind.CITATION:
            return string_citation
        case OutputType.STRING, StyleKind.CSL:
            return csl_json
        case OutputType.STRING, StyleKind.BIBTEX:
            return string_bibtex
        case OutputType.JSON, StyleKind.CSL:
            return csl_json
        case OutputType.JSON, StyleKind.BIBTEX:
            return bibtex_json
        case OutputType.JSON, StyleKind.CITATION:
            raise InvalidCombinationError(
                options.type,
                options.style,
                "Combination type/style of json/citation-* is not valid: "
                f"{options.type}/{options.style}",
            )

    raise InvalidCombinationError(options.type, options.style)
