"""Bibliography output for ``citation-*`` styles."""

import html
import logging
import re
from typing import Any

from bibcite.citations.engine import fetch_engine
from bibcite.citations.items import fetch_item_callback
from bibcite.citations.locales import fetch_locale
from bibcite.citations.styles import fetch_style
from bibcite.core.models import BibliographyResult, Options

logger = logging.getLogger(__name__)

FALLBACK_LANG = "en-US"
ENTRY_SEPARATOR = "<br />"

OPENING_TAG = re.compile(r"^(\s*<[a-zA-Z][a-zA-Z0-9]*)([^>]*>)")


def get_prefixed_entry(
    element: str,
    index: int,
    sorted_ids: list[str],
    numbered: bool = False,
) -> str:
    """Mark a rendered entry with its ID and, for numeric styles, its number.

    The ID and number come from the entry's rank in ``sorted_ids``, so
    numbering follows the style's sort order rather than the order of the
    collection.

    Args:
        element: Rendered entry markup.
        index: Position of the entry in the bibliography.
        sorted_ids: Entry IDs in bibliography order.
        numbered: Insert a ``[n]`` label.

    Returns:
        Entry markup with a ``data-csl-entry-id`` attribute on its first tag.
    """
    item_id = html.escape(str(sorted_ids[index]))
    label = f'<div class="csl-left-margin">[{index + 1}] </div>' if numbered else ""

    match = OPENING_TAG.match(element)
    if not match:
        return f"{label}{element}"

    return (
        f'{match.group(1)} data-csl-entry-id="{item_id}"{match.group(2)}'
        f"{label}{element[match.end():]}"
    )


def get_bibliography(
    data: list[dict[str, Any]], options: Options
) -> BibliographyResult:
    """Render a bibliography with the citation engine.

    Args:
        data: Snapshot of the entries.
        options: Resolved options; ``style_format`` names the built-in style
            unless ``template`` is given, ``locale`` replaces the built-in
            locale when given.

    Returns:
        Bibliography wrapper, prefixed entries and engine ordering.

    Raises:
        EngineError: If the engine cannot load the style or locale, or an
            item is missing.
    """
    if options.locale:
        custom_locale = options.locale

        def retrieve_locale(lang: str) -> str:
            return custom_locale

    else:
        retrieve_locale = fetch_locale

    retrieve_item = fetch_item_callback(data)
    template = options.template or fetch_style(options.style_format)
    lang = options.lang if fetch_locale(options.lang) else FALLBACK_LANG
    if lang != options.lang:
        logger.debug(f"Locale {options.lang!r} not available, using {lang}")

    engine = fetch_engine(
        options.style_format, lang, template, retrieve_item, retrieve_locale
    )
    sorted_ids = engine.update_items([entry.get("id") for entry in data])

    params, body = engine.make_bibliography()
    entries = [
        get_prefixed_entry(element, index, sorted_ids, params.numbered)
        for index, element in enumerate(body)
    ]

    return BibliographyResult(
        wrapper_start=params.bibstart,
        wrapper_end=params.bibend,
        entries=tuple(entries),
        sorted_ids=tuple(sorted_ids),
    )


def get_bibliography_html(data: list[dict[str, Any]], options: Options) -> str:
    """Render a bibliography as an HTML fragment."""
    return get_bibliography(data, options).render(ENTRY_SEPARATOR)
