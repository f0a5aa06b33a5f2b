"""CSL-JSON output."""

from typing import Any

import msgspec

_encoder = msgspec.json.Encoder()


def get_json(data: list[dict[str, Any]], indent: int | None = None) -> str:
    """Serialize entries as CSL-JSON.

    The compact form matches ``JSON.stringify``: no whitespace, non-ASCII
    characters written as-is and keys in their original order.

    Args:
        data: CSL-JSON entries.
        indent: Pretty-print with this many spaces per level.

    Returns:
        JSON text.
    """
    encoded = _encoder.encode(data)
    if indent:
        encoded = msgspec.json.format(encoded, indent=indent)
    return encoded.decode("utf-8")
