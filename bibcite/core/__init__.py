"""Core data model, option resolution and errors."""

from bibcite.core.exceptions import (
    BibciteError,
    EngineError,
    InvalidCombinationError,
    ItemNotFoundError,
    MaterializationError,
)
from bibcite.core.fields import (
    DateParts,
    Name,
    parse_date,
    parse_name,
    parse_names,
)
from bibcite.core.models import (
    BibliographyResult,
    Options,
    OutputFormat,
    OutputType,
    StyleKind,
)
from bibcite.core.options import (
    DEFAULT_OPTIONS,
    OPTION_KEYS,
    merge_options,
    resolve_options,
)
from bibcite.core.snapshot import snapshot

__all__ = [
    # Models
    "Options",
    "OutputFormat",
    "OutputType",
    "StyleKind",
    "BibliographyResult",
    # Options
    "DEFAULT_OPTIONS",
    "OPTION_KEYS",
    "merge_options",
    "resolve_options",
    # CSL fields
    "Name",
    "DateParts",
    "parse_name",
    "parse_names",
    "parse_date",
    # Snapshot
    "snapshot",
    # Errors
    "BibciteError",
    "InvalidCombinationError",
    "EngineError",
    "ItemNotFoundError",
    "MaterializationError",
]
