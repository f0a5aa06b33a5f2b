"""Isolated copies of entry collections."""

import copy
from collections.abc import Iterable
from typing import Any


def snapshot(entries: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return a deep copy of the entries.

    Every formatting call hands its own copy of the collection to the
    converters and the citation engine.
    """
    return copy.deepcopy(list(entries))
