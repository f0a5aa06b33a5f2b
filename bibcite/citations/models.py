"""Style template and locale definitions read by the citation engine.

Templates and locales are JSON documents. Keys use the hyphenated CSL
spelling (``et-al-min``, ``font-style``); the structs below map them to
Python attributes.
"""

from __future__ import annotations

import msgspec


class Part(msgspec.Struct, frozen=True, kw_only=True, rename="kebab"):
    """One rendering element of a bibliography layout.

    A part renders a single variable, or, when ``parts`` is set, a group of
    child parts joined with ``delimiter``. Empty variables and groups whose
    children are all empty render nothing, including their affixes.
    """

    variable: str = ""
    value: str = ""
    parts: list[Part] = msgspec.field(default_factory=list)
    substitute: bool = False

    prefix: str = ""
    suffix: str = ""
    font_style: str = "normal"
    quotes: bool = False
    text_case: str = "preserve"

    types: list[str] = msgspec.field(default_factory=list)
    exclude_types: list[str] = msgspec.field(default_factory=list)

    # Names
    name_as_sort_order: str = ""
    initialize: bool = True
    initialize_with: str = "."
    sort_separator: str = ", "
    and_: str = msgspec.field(default="text", name="and")
    delimiter: str = ", "
    delimiter_precedes_last: bool = True
    et_al_min: int = 0
    et_al_use_first: int = 1

    # Dates
    date_form: str = "year"

    def applies_to(self, item_type: str) -> bool:
        """Check the type filters against a CSL item type."""
        if self.types and item_type not in self.types:
            return False
        return item_type not in self.exclude_types


class SortKey(msgspec.Struct, frozen=True, kw_only=True):
    """One bibliography sort key."""

    key: str
    order: str = "ascending"

    @property
    def descending(self) -> bool:
        return self.order == "descending"


class Layout(msgspec.Struct, frozen=True, kw_only=True):
    """Affixes and delimiter around the top-level parts of an entry."""

    prefix: str = ""
    suffix: str = "."
    delimiter: str = ". "


class BibliographySection(msgspec.Struct, frozen=True, kw_only=True, rename="kebab"):
    """Bibliography rules of a style."""

    parts: list[Part]
    layout: Layout = msgspec.field(default_factory=Layout)
    sort: list[SortKey] = msgspec.field(default_factory=list)
    entry_spacing: int = 1
    line_spacing: int = 1
    hanging_indent: bool = False


class StyleInfo(msgspec.Struct, frozen=True, kw_only=True, rename="kebab"):
    """Style metadata."""

    id: str
    title: str = ""
    citation_format: str = "author-date"


class StyleTemplate(msgspec.Struct, frozen=True, kw_only=True):
    """A complete style template."""

    info: StyleInfo
    bibliography: BibliographySection

    @property
    def is_numeric(self) -> bool:
        """Check if entries are labelled with citation numbers."""
        return self.info.citation_format == "numeric"


class Locale(msgspec.Struct, frozen=True, kw_only=True, rename="kebab"):
    """Localized terms and month names."""

    lang: str
    terms: dict[str, str] = msgspec.field(default_factory=dict)
    months: list[str] = msgspec.field(default_factory=list)


class BibliographyParams(msgspec.Struct, frozen=True, kw_only=True):
    """Wrapper and layout information returned with a bibliography."""

    bibstart: str
    bibend: str
    entry_spacing: int = 1
    line_spacing: int = 1
    hanging_indent: bool = False
    numbered: bool = False
