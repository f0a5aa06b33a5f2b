"""Option resolution for output formatting."""

import logging
from collections.abc import Mapping
from typing import Any

from .models import Options

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: dict[str, str] = {
    "format": "real",
    "type": "json",
    "style": "csl",
    "lang": "en-US",
}

# Applied after instance options, so a custom locale or template only ever
# comes from the call itself.
FORCED_OPTIONS: dict[str, str] = {"locale": "", "template": ""}

OPTION_KEYS = frozenset(Options.__struct_fields__)


def merge_options(*sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge option mappings, later sources take precedence.

    Missing sources and ``None`` values are skipped. Keys that are not
    output options are dropped.
    """
    merged: dict[str, Any] = {}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if key not in OPTION_KEYS:
                logger.debug(f"Ignoring unknown output option: {key}")
                continue
            if value is None:
                continue
            merged[key] = value
    return merged


def resolve_options(
    instance: Mapping[str, Any] | None = None,
    call: Mapping[str, Any] | None = None,
) -> Options:
    """Resolve defaults, instance options and call options.

    Args:
        instance: Options stored on the collection.
        call: Options passed to a single ``get`` call.

    Returns:
        Resolved options.
    """
    merged = merge_options(DEFAULT_OPTIONS, instance, FORCED_OPTIONS, call)
    return Options(**{key: str(value) for key, value in merged.items()})
