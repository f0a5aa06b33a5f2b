"""Conversion of pipeline text into live values."""

from collections.abc import Callable
from typing import Any

import msgspec

from bibcite.core.exceptions import MaterializationError
from bibcite.core.models import Options, OutputType

Renderer = Callable[[str], Any]


def materialize(
    result: str | None,
    options: Options,
    renderer: Renderer | None = None,
) -> Any:
    """Return pipeline output in the requested format.

    With ``format="real"``, JSON output is parsed and HTML output is handed
    to ``renderer``. Without a renderer, HTML stays text. String output and
    ``format="string"`` are returned unchanged.

    Raises:
        MaterializationError: If JSON output cannot be parsed.
    """
    if result is None or not options.is_real:
        return result

    if options.type == OutputType.JSON.value:
        try:
            return msgspec.json.decode(result)
        except msgspec.DecodeError as e:
            raise MaterializationError(f"Malformed JSON output: {e}") from e

    if options.type == OutputType.HTML.value and renderer is not None:
        return renderer(result)

    return result
