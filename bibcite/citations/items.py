"""Item retrieval for the citation engine."""

from collections.abc import Callable
from typing import Any

ItemCallback = Callable[[str], dict[str, Any] | None]


def fetch_item_callback(data: list[dict[str, Any]]) -> ItemCallback:
    """Build a lookup the engine uses to fetch items by ID.

    When IDs repeat, the first entry with that ID wins. Unknown IDs
    return None.
    """
    index: dict[str, dict[str, Any]] = {}
    for entry in data:
        index.setdefault(str(entry.get("id")), entry)

    def retrieve_item(item_id: str) -> dict[str, Any] | None:
        return index.get(str(item_id))

    return retrieve_item
