"""BibTeX output for CSL-JSON entries.

This module converts CSL-JSON entries into BibTeX, either as a JSON-ready
structure (``{"type", "label", "properties"}``) or as BibTeX text. The
text form comes in a plain flavor and an HTML flavor for embedding in
web pages.

Key components:
- BibtexEncoder: maps one CSL-JSON entry to BibTeX type, label and fields
- get_bibtex_json: JSON-ready BibTeX structure for one entry
- get_bibtex: BibTeX text for a list of entries
"""

import html
from typing import Any

from bibcite.convert.markup import strip_tags
from bibcite.core.fields import parse_date, parse_names

MONTHS = "jan feb mar apr may jun jul aug sep oct nov dec".split()


class BibtexEncoder:
    """Encode CSL-JSON entries to BibTeX.

    Handles special character escaping and field ordering. Braces are
    preserved as they have semantic meaning in BibTeX (case protection).
    """

    SPECIAL_CHARS = {
        "\\": "\\\\",
        "$": "\\$",
        "&": "\\&",
        "#": "\\#",
        "_": "\\_",
        "%": "\\%",
        "~": "\\~{}",
        "^": "\\^{}",
    }

    TYPES = {
        "article": "article",
        "article-journal": "article",
        "article-magazine": "article",
        "article-newspaper": "article",
        "book": "book",
        "chapter": "incollection",
        "paper-conference": "inproceedings",
        "thesis": "phdthesis",
        "report": "techreport",
        "manuscript": "unpublished",
        "webpage": "misc",
    }

    FIELD_ORDER = [
        "author",
        "editor",
        "title",
        "booktitle",
        "journal",
        "volume",
        "number",
        "pages",
        "chapter",
        "edition",
        "series",
        "publisher",
        "address",
        "organization",
        "institution",
        "school",
        "year",
        "month",
        "note",
        "doi",
        "url",
        "isbn",
        "issn",
        "abstract",
        "keywords",
    ]

    # Variables whose BibTeX field does not depend on the entry type
    SIMPLE_FIELDS = {
        "title": "title",
        "volume": "volume",
        "issue": "number",
        "edition": "edition",
        "collection-title": "series",
        "publisher-place": "address",
        "note": "note",
        "DOI": "doi",
        "URL": "url",
        "ISBN": "isbn",
        "ISSN": "issn",
        "abstract": "abstract",
        "keyword": "keywords",
    }

    def escape(self, text: str) -> str:
        """Escape special LaTeX characters for BibTeX.

        Args:
            text: Text to escape.

        Returns:
            Text with special characters escaped.
        """
        if not text:
            return text

        result = text
        for char, escaped in self.SPECIAL_CHARS.items():
            result = result.replace(char, escaped)
        return result

    def entry_type(self, entry: dict[str, Any]) -> str:
        """Map the CSL type of an entry to a BibTeX entry type."""
        return self.TYPES.get(str(entry.get("type", "")), "misc")

    def label(self, entry: dict[str, Any]) -> str:
        """Citation key for an entry."""
        return str(entry.get("citation-label") or entry.get("id") or "")

    def properties(self, entry: dict[str, Any]) -> dict[str, str]:
        """Map CSL variables to BibTeX fields in BibTeX field order."""
        csl_type = str(entry.get("type", ""))
        fields: dict[str, str] = {}

        for variable in ("author", "editor"):
            names = parse_names(entry.get(variable))
            if names:
                fields[variable] = " and ".join(name.to_bibtex() for name in names)

        for variable, field in self.SIMPLE_FIELDS.items():
            value = entry.get(variable)
            if value not in (None, ""):
                fields[field] = str(value)

        container = entry.get("container-title")
        if container:
            if csl_type in ("chapter", "paper-conference"):
                fields["booktitle"] = str(container)
            else:
                fields["journal"] = str(container)

        publisher = entry.get("publisher")
        if publisher:
            field = {"thesis": "school", "report": "institution"}.get(
                csl_type, "publisher"
            )
            fields[field] = str(publisher)

        if entry.get("page"):
            fields["pages"] = str(entry["page"]).replace("--", "-").replace("-", "--")

        date = parse_date(entry.get("issued"))
        if date.year is not None:
            fields["year"] = str(date.year)
            if date.month and 1 <= date.month <= 12:
                fields["month"] = MONTHS[date.month - 1]
        elif date.literal:
            fields["year"] = date.literal

        ordered = {f: fields.pop(f) for f in self.FIELD_ORDER if f in fields}
        ordered.update(sorted(fields.items()))
        return ordered

    def encode_json(self, entry: dict[str, Any]) -> dict[str, Any]:
        """Convert one entry to a JSON-ready BibTeX structure."""
        return {
            "type": self.entry_type(entry),
            "label": self.label(entry),
            "properties": self.properties(entry),
        }

    def format_field(self, field: str, value: str) -> str:
        """Format one ``field={value},`` line body."""
        if field == "month" and value in MONTHS:
            return f"{field}={value},"
        return f"{field}={{{self.escape(value)}}},"


class Markup:
    """Wrappers for one flavor of BibTeX text output."""

    def __init__(
        self,
        body: tuple[str, str],
        entry: tuple[str, str],
        fields: tuple[str, str],
        field: tuple[str, str],
        escape=None,
    ):
        self.body = body
        self.entry = entry
        self.fields = fields
        self.field = field
        self.escape = escape or (lambda text: text)


TEXT_MARKUP = Markup(
    body=("", ""),
    entry=("", "\n\n"),
    fields=("\n", ""),
    field=("\t", "\n"),
    escape=strip_tags,
)

HTML_MARKUP = Markup(
    body=('<div class="csl-bib-body">', "</div>"),
    entry=('<div class="csl-entry">', "</div>"),
    fields=('<ul style="list-style-type:none">', "</ul>"),
    field=("<li>", "</li>"),
    escape=lambda text: html.escape(text, quote=False),
)


def get_bibtex_json(entry: dict[str, Any]) -> dict[str, Any]:
    """Convert a CSL-JSON entry to ``{"type", "label", "properties"}``."""
    return BibtexEncoder().encode_json(entry)


def get_bibtex(data: list[dict[str, Any]], html: bool = False) -> str:
    """Format entries as BibTeX text.

    Args:
        data: CSL-JSON entries.
        html: Produce HTML markup with escaped values. Plain text drops
            inline markup such as ``<i>`` from the values.

    Returns:
        BibTeX text, or an HTML fragment containing it.
    """
    encoder = BibtexEncoder()
    markup = HTML_MARKUP if html else TEXT_MARKUP

    entries = []
    for entry in data:
        bib = encoder.encode_json(entry)
        fields = "".join(
            markup.field[0]
            + markup.escape(encoder.format_field(field, value))
            + markup.field[1]
            for field, value in bib["properties"].items()
        )
        head = markup.escape(f"@{bib['type']}{{{bib['label']},")
        entries.append(
            markup.entry[0]
            + head
            + markup.fields[0]
            + fields
            + markup.fields[1]
            + "}"
            + markup.entry[1]
        )

    return markup.body[0] + "".join(entries) + markup.body[1]
