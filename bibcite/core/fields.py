"""Readers for CSL-JSON name and date variables.

CSL-JSON stores names as objects (``{"family": ..., "given": ...}``) and
dates as ``{"date-parts": [[year, month, day]]}``, but real-world data also
carries BibTeX-style name strings and bare years. These helpers accept
both so that converters and the citation engine see one shape.
"""

import re
from typing import Any

import msgspec

NAME_VARIABLES = ("author", "editor", "translator", "container-author")
DATE_VARIABLES = ("issued", "accessed", "event-date", "original-date")


class Name(msgspec.Struct, frozen=True, kw_only=True):
    """A single personal or institutional name."""

    family: str = ""
    given: str = ""
    particle: str = ""
    suffix: str = ""
    literal: str = ""

    @property
    def is_literal(self) -> bool:
        """Check if this is an institution or otherwise unparsed name."""
        return bool(self.literal) or not self.family

    @property
    def last(self) -> str:
        """Family name with particle, or the literal."""
        if self.is_literal:
            return self.literal or self.given
        return f"{self.particle} {self.family}".strip()

    def to_bibtex(self) -> str:
        """Format as ``Last, First`` for BibTeX name lists."""
        if self.is_literal:
            return f"{{{self.last}}}"
        parts = [self.last]
        if self.suffix:
            parts.append(self.suffix)
        if self.given:
            parts.append(self.given)
        return ", ".join(parts)


class DateParts(msgspec.Struct, frozen=True):
    """Year, month and day of a date variable; month and day may be missing."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    literal: str = ""

    @property
    def is_empty(self) -> bool:
        return self.year is None and not self.literal


def parse_name(value: Any) -> Name:
    """Parse one CSL name object or BibTeX name string."""
    if isinstance(value, dict):
        return Name(
            family=str(value.get("family") or ""),
            given=str(value.get("given") or ""),
            particle=str(
                value.get("non-dropping-particle")
                or value.get("dropping-particle")
                or ""
            ),
            suffix=str(value.get("suffix") or ""),
            literal=str(value.get("literal") or ""),
        )

    text = str(value).strip()
    if text.startswith("{") and text.endswith("}"):
        return Name(literal=text[1:-1])

    if "," in text:
        # "Last, First" or "Last, Jr., First"
        parts = [p.strip() for p in text.split(",")]
        if len(parts) >= 3:
            return Name(family=parts[0], suffix=parts[1], given=", ".join(parts[2:]))
        return Name(family=parts[0], given=parts[1])

    words = text.split()
    if len(words) == 1:
        return Name(family=words[0])
    return Name(family=words[-1], given=" ".join(words[:-1]))


def parse_names(value: Any) -> list[Name]:
    """Parse a name variable into a list of names.

    BibTeX uses ' and ' as the delimiter between names; escaped
    ampersands are not treated as delimiters.
    """
    if not value:
        return []
    if isinstance(value, list | tuple):
        return [parse_name(v) for v in value]
    if isinstance(value, dict):
        return [parse_name(value)]

    temp = str(value).replace(r"\&", "\x00")
    names = re.split(r"\s+and\s+", temp)
    return [parse_name(n.replace("\x00", "&")) for n in names if n.strip()]


def _to_int(value: Any) -> int | None:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_date(value: Any) -> DateParts:
    """Parse a CSL date variable.

    Accepts ``date-parts``, ``raw`` and ``literal`` forms, ints and
    ISO-like strings (``2020``, ``2020-05``, ``2020-05-17``).
    """
    if value is None or value == "":
        return DateParts()

    if isinstance(value, dict):
        if value.get("date-parts"):
            parts = value["date-parts"]
            if not isinstance(parts, list | tuple):
                return parse_date(parts)
            # One list per range end; a flat list holds a single date
            first = parts[0] if isinstance(parts[0], list | tuple) else parts
            parts = [_to_int(p) for p in first[:3]]
            parts += [None] * (3 - len(parts))
            return DateParts(*parts)
        if value.get("raw"):
            return parse_date(value["raw"])
        if value.get("literal"):
            return DateParts(literal=str(value["literal"]))
        return DateParts()

    if isinstance(value, int):
        return DateParts(value)

    match = re.match(r"^\s*(-?\d{1,4})(?:-(\d{1,2}))?(?:-(\d{1,2}))?", str(value))
    if not match:
        return DateParts(literal=str(value))
    return DateParts(*(_to_int(g) if g else None for g in match.groups()))
