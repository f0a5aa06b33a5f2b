"""Output dispatch for entry collections."""

import logging
from collections.abc import Iterable
from typing import Any

from bibcite.core.exceptions import InvalidCombinationError
from bibcite.core.models import Options
from bibcite.core.snapshot import snapshot

from .materialize import Renderer, materialize
from .pipelines import select_pipeline

logger = logging.getLogger(__name__)


def format_output(
    entries: Iterable[dict[str, Any]],
    options: Options,
    renderer: Renderer | None = None,
) -> Any:
    """Format entries according to resolved options.

    Invalid type/style combinations are logged and produce None; errors from
    the citation engine and converters propagate.

    Args:
        entries: Live entry collection, left untouched.
        options: Resolved options.
        renderer: Turns HTML text into live nodes for ``format="real"``.

    Returns:
        Parsed JSON, rendered nodes or text, depending on the options.
    """
    data = snapshot(entries)

    try:
        pipeline = select_pipeline(options)
    except InvalidCombinationError as e:
        logger.error(f"[get] {e}")
        return None

    return materialize(pipeline(data, options), options, renderer)
