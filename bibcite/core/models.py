"""Core data models for output formatting.

This module defines the value types that flow through one formatting call:
the resolved output options, the enumerations the pipeline selector matches
on, and the bibliography result assembled from the citation engine.

Key components:
- OutputFormat / OutputType / StyleKind: closed sets of option values
- Options: resolved output options with style decomposition
- BibliographyResult: wrapper, rendered entries and engine ordering
"""

import enum

import msgspec


class OutputFormat(enum.Enum):
    """Whether output is returned as a live value or as text."""

    REAL = "real"
    STRING = "string"


class OutputType(enum.Enum):
    """Representation requested by the caller."""

    STRING = "string"
    HTML = "html"
    JSON = "json"


class StyleKind(enum.Enum):
    """Top-level category of an output style."""

    CSL = "csl"
    BIBTEX = "bibtex"
    CITATION = "citation"


class Options(msgspec.Struct, frozen=True, kw_only=True):
    """Resolved output options for a single formatting call.

    Values are kept as given so that unknown types or styles can be reported
    by the pipeline selector instead of failing during resolution.
    """

    format: str = OutputFormat.REAL.value
    type: str = OutputType.JSON.value
    style: str = StyleKind.CSL.value
    lang: str = "en-US"
    locale: str = ""
    template: str = ""

    @property
    def style_kind(self) -> str:
        """Style category, everything before the first hyphen."""
        return self.style.partition("-")[0]

    @property
    def style_format(self) -> str:
        """Named style within the category, empty if there is none."""
        return self.style.partition("-")[2]

    @property
    def is_real(self) -> bool:
        """Check if the caller asked for a live value."""
        return self.format == OutputFormat.REAL.value


class BibliographyResult(msgspec.Struct, frozen=True, kw_only=True):
    """Bibliography produced by the citation engine for one call."""

    wrapper_start: str
    wrapper_end: str
    entries: tuple[str, ...]
    sorted_ids: tuple[str, ...]

    def __post_init__(self):
        """Validate that every rendered entry has an ID."""
        if len(self.entries) != len(self.sorted_ids):
            raise ValueError(
                f"Bibliography has {len(self.entries)} entries "
                f"but {len(self.sorted_ids)} sorted IDs"
            )

    def render(self, separator: str = "<br />") -> str:
        """Join the entries inside the wrapper."""
        return f"{self.wrapper_start}{separator.join(self.entries)}{self.wrapper_end}"
