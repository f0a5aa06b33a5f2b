"""Citation processing engine.

The engine turns registered items into bibliography entries following a
style template and a locale. It is created for a single bibliography:
construct it, register the items once with :meth:`CitationEngine.update_items`,
then call :meth:`CitationEngine.make_bibliography`.

Rendered entries are HTML. Every text value is escaped; italic parts are
wrapped in ``<i>`` and each entry in ``<div class="csl-entry">``.
"""

import html
import logging
import re
from collections.abc import Callable
from typing import Any

import msgspec

from bibcite.core.exceptions import EngineError, ItemNotFoundError
from bibcite.core.fields import DATE_VARIABLES, NAME_VARIABLES, parse_date, parse_names

from .formatters import AuthorFormatter, DateFormatter, TitleFormatter, format_ordinal
from .items import ItemCallback
from .locales import DEFAULT_TERMS, LOCALES
from .models import BibliographyParams, Locale, Part, SortKey, StyleTemplate

logger = logging.getLogger(__name__)

LocaleCallback = Callable[[str], str | None]

TERM_PATTERN = re.compile(r"\{([a-z-]+)\}")
TRAILING_TAGS = re.compile(r"(?:<[^>]+>)+$")
PAGE_RANGE = re.compile(r"\s*-{1,2}\s*")

TITLE_VARIABLES = ("title", "container-title", "collection-title")

BIB_START = '<div class="csl-bib-body">'
BIB_END = "</div>"


class CitationEngine:
    """Bibliography processor for one style and language."""

    def __init__(
        self,
        style_id: str,
        lang: str,
        template: str,
        retrieve_item: ItemCallback,
        retrieve_locale: LocaleCallback,
    ):
        """Initialize engine.

        Args:
            style_id: Name the style was requested under
            lang: RFC 5646 language tag passed to ``retrieve_locale``
            template: Style template JSON
            retrieve_item: Returns item data for an ID, None if unknown
            retrieve_locale: Returns locale JSON for a language, None if unknown

        Raises:
            EngineError: If the template or locale is missing or malformed.
        """
        self.style_id = style_id
        self.lang = lang
        self.style = self._load_style(template)
        self.locale = self._load_locale(retrieve_locale(lang), lang)
        self.retrieve_item = retrieve_item

        self.author_formatter = AuthorFormatter()
        self.date_formatter = DateFormatter(
            self.locale.months or LOCALES["en-US"]["months"],
            no_date=self.term("no-date"),
        )
        self.title_formatter = TitleFormatter()

        # (registration index, id, item) in bibliography order
        self._registry: list[tuple[int, str, dict[str, Any]]] = []

    def _load_style(self, template: str) -> StyleTemplate:
        if not template:
            raise EngineError(f"No style template for style: {self.style_id!r}")
        try:
            return msgspec.json.decode(template, type=StyleTemplate)
        except msgspec.DecodeError as e:
            raise EngineError(
                f"Invalid style template for {self.style_id!r}: {e}"
            ) from e

    def _load_locale(self, data: str | None, lang: str) -> Locale:
        if not data:
            raise EngineError(f"Locale not available: {lang}")
        try:
            return msgspec.json.decode(data, type=Locale)
        except msgspec.DecodeError as e:
            raise EngineError(f"Invalid locale for {lang}: {e}") from e

    def term(self, name: str) -> str:
        """Look up a locale term, falling back to the default terms."""
        if name in self.locale.terms:
            return self.locale.terms[name]
        return DEFAULT_TERMS.get(name, "")

    def update_items(self, ids: list[str]) -> list[str]:
        """Register items and sort them for the bibliography.

        Args:
            ids: Item IDs in citation order.

        Returns:
            Item IDs in bibliography order.

        Raises:
            ItemNotFoundError: If an ID is not known to the item callback.
        """
        registry = []
        for index, item_id in enumerate(ids):
            item = self.retrieve_item(item_id)
            if item is None:
                raise ItemNotFoundError(item_id)
            registry.append((index, str(item_id), item))

        # Stable passes, least significant key first
        for sort_key in reversed(self.style.bibliography.sort):
            registry = self._sort_pass(registry, sort_key)

        self._registry = registry
        sorted_ids = [item_id for _, item_id, _ in registry]
        logger.debug(f"Registered {len(sorted_ids)} items for {self.style_id}")
        return sorted_ids

    def _sort_pass(
        self,
        registry: list[tuple[int, str, dict[str, Any]]],
        sort_key: SortKey,
    ) -> list[tuple[int, str, dict[str, Any]]]:
        """Sort by one key; items without a value go last."""
        present = []
        missing = []
        for record in registry:
            value = self._sort_value(record, sort_key.key)
            (missing if value is None else present).append((value, record))

        present.sort(key=lambda pair: pair[0], reverse=sort_key.descending)
        return [record for _, record in present + missing]

    def _sort_value(self, record: tuple[int, str, dict[str, Any]], key: str) -> Any:
        index, _, item = record
        match key:
            case "citation-number":
                return index

            case "author":
                names = parse_names(item.get("author")) or parse_names(
                    item.get("editor")
                )
                if not names:
                    return None
                return " ".join(f"{n.last} {n.given}".strip() for n in names).lower()

            case "issued":
                date = parse_date(item.get("issued"))
                if date.year is None:
                    return None
                return (date.year, date.month or 0, date.day or 0)

            case _:
                value = item.get(key)
                if value in (None, ""):
                    return None
                return str(value).lower()

    def make_bibliography(self) -> tuple[BibliographyParams, list[str]]:
        """Render registered items in bibliography order.

        Returns:
            Wrapper and layout parameters, and one rendered entry per item.
        """
        section = self.style.bibliography
        params = BibliographyParams(
            bibstart=BIB_START,
            bibend=BIB_END,
            entry_spacing=section.entry_spacing,
            line_spacing=section.line_spacing,
            hanging_indent=section.hanging_indent,
            numbered=self.style.is_numeric,
        )
        entries = [self.render_entry(item) for _, _, item in self._registry]
        return params, entries

    def render_entry(self, item: dict[str, Any]) -> str:
        """Render one bibliography entry."""
        layout = self.style.bibliography.layout
        parts = self.style.bibliography.parts
        pieces = [self._render_part(part, item) for part in parts]
        body = self._join([p for p in pieces if p], self._affix(layout.delimiter))

        suffix = self._affix(layout.suffix)
        if body and suffix and not self._ends_with(body, suffix):
            body += suffix

        return f'<div class="csl-entry">{self._affix(layout.prefix)}{body}</div>'

    def _render_part(self, part: Part, item: dict[str, Any]) -> str:
        if not part.applies_to(str(item.get("type", ""))):
            return ""

        if part.parts:
            rendered = [self._render_part(child, item) for child in part.parts]
            rendered = [r for r in rendered if r]
            if not rendered:
                return ""
            if part.substitute:
                rendered = rendered[:1]
            text = self._join(rendered, self._affix(part.delimiter))
        elif part.value:
            text = self._affix(part.value)
        elif part.variable:
            value = self._render_variable(part, item)
            if not value:
                return ""
            text = html.escape(value, quote=False)
        else:
            return ""

        if part.quotes:
            text = f"{self._affix('{open-quote}')}{text}{self._affix('{close-quote}')}"
        if part.font_style == "italic":
            text = f"<i>{text}</i>"

        return f"{self._affix(part.prefix)}{text}{self._affix(part.suffix)}"

    def _render_variable(self, part: Part, item: dict[str, Any]) -> str:
        name = part.variable
        value = item.get(name)

        if name in NAME_VARIABLES:
            names = parse_names(value)
            if not names:
                return ""
            and_sep = {"text": self.term("and"), "symbol": "&"}.get(part.and_, "")
            return self.author_formatter.format_multiple(
                names,
                sort_order=part.name_as_sort_order,
                and_sep=and_sep,
                delimiter=part.delimiter,
                delimiter_precedes_last=part.delimiter_precedes_last,
                et_al=self.term("et-al"),
                et_al_min=part.et_al_min,
                et_al_use_first=part.et_al_use_first,
                initialize=part.initialize,
                initialize_with=part.initialize_with,
                sort_separator=part.sort_separator,
            )

        if name in DATE_VARIABLES:
            date = parse_date(value)
            if date.is_empty:
                return self.term("no-date") if name == "issued" else ""
            return self.date_formatter.format_date(date, part.date_form)

        if value is None or value == "" or value == []:
            return ""
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        text = str(value)

        if name in ("page", "page-first"):
            return PAGE_RANGE.sub("–", text)
        if name == "edition" and text.isdigit():
            if self.locale.lang.startswith("en"):
                return format_ordinal(text)
            return f"{text}."
        if name in TITLE_VARIABLES:
            return self.title_formatter.format(text, part.text_case)
        return text

    def _affix(self, text: str) -> str:
        """Expand ``{term}`` placeholders and escape the result."""
        if not text:
            return ""

        def replace(match: re.Match) -> str:
            name = match.group(1)
            if name in self.locale.terms or name in DEFAULT_TERMS:
                return self.term(name)
            return match.group(0)

        return html.escape(TERM_PATTERN.sub(replace, text), quote=False)

    def _join(self, pieces: list[str], delimiter: str) -> str:
        """Join rendered pieces without doubling punctuation."""
        result = ""
        for piece in pieces:
            if result:
                separator = delimiter
                if separator[:1] in (".", ",", ";", ":") and self._ends_with(
                    result, separator[0]
                ):
                    separator = separator[1:]
                result += separator
            result += piece
        return result

    def _ends_with(self, markup: str, text: str) -> bool:
        return TRAILING_TAGS.sub("", markup).endswith(text)


def fetch_engine(
    style: str,
    lang: str,
    template: str,
    retrieve_item: ItemCallback,
    retrieve_locale: LocaleCallback,
) -> CitationEngine:
    """Create a citation engine for one bibliography."""
    return CitationEngine(style, lang, template, retrieve_item, retrieve_locale)
