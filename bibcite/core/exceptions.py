"""Exception classes for output formatting."""


class BibciteError(Exception):
    """Base exception for bibcite errors."""

    pass


class InvalidCombinationError(BibciteError, ValueError):
    """Raised when an output type and style have no formatting pipeline."""

    def __init__(self, type: str, style: str, message: str | None = None):
        """Initialize with the offending type and style."""
        self.type = type
        self.style = style
        super().__init__(message or "Invalid options")


class EngineError(BibciteError):
    """Raised when the citation engine cannot process a style, locale or item."""

    pass


class ItemNotFoundError(EngineError, KeyError):
    """Raised when the engine asks for an item that is not in the collection."""

    def __init__(self, item_id: str):
        """Initialize with item ID."""
        self.item_id = item_id
        super().__init__(f"Item not found: {item_id}")

    def __str__(self) -> str:
        return self.args[0]


class MaterializationError(BibciteError):
    """Raised when pipeline output cannot be turned into a real value."""

    pass
