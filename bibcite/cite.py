"""Entry collections with formatted output.

A :class:`Cite` holds an ordered list of CSL-JSON entries together with
instance-level output options. Every change to the collection is recorded
as a version, so earlier states can be retrieved or restored.
"""

import copy
import logging
import uuid
from collections.abc import Iterator
from datetime import datetime
from typing import Any

import msgspec

from bibcite.convert.bibtex import BibtexEncoder
from bibcite.convert.markup import render_fragment
from bibcite.core.options import OPTION_KEYS, resolve_options
from bibcite.core.snapshot import snapshot
from bibcite.output.dispatch import format_output
from bibcite.output.materialize import Renderer

logger = logging.getLogger(__name__)


class Version(msgspec.Struct, frozen=True, kw_only=True):
    """State of a collection after one change."""

    action: str
    data: list[dict[str, Any]]
    options: dict[str, Any]
    timestamp: datetime = msgspec.field(default_factory=datetime.now)


class Cite:
    """Ordered collection of CSL-JSON entries."""

    def __init__(
        self,
        data: Any = None,
        options: dict[str, Any] | None = None,
        renderer: Renderer | None = render_fragment,
    ):
        """Initialize collection.

        Args:
            data: Entry, list of entries or another Cite.
            options: Instance-level output options.
            renderer: Turns HTML into live nodes for ``format="real"``;
                None keeps HTML as text.
        """
        self.data: list[dict[str, Any]] = []
        self._options: dict[str, Any] = {}
        self._log: list[Version] = []
        self.renderer = renderer

        if options:
            self.options(options, log=False)
        self.set(data if data is not None else [])

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(snapshot(self.data))

    def __repr__(self) -> str:
        return f"Cite({len(self.data)} entries, version {self.current_version()})"

    # Versions

    def _record(self, action: str) -> None:
        self._log.append(
            Version(
                action=action,
                data=snapshot(self.data),
                options=copy.deepcopy(self._options),
            )
        )

    def current_version(self) -> int:
        """Number of recorded versions."""
        return len(self._log)

    def retrieve_version(self, version: int = 1) -> "Cite | None":
        """Get a copy of the collection as it was at a version.

        Args:
            version: One-based version number.

        Returns:
            New collection, or None if the version does not exist.
        """
        if version < 1 or version > len(self._log):
            return None
        state = self._log[version - 1]
        return Cite(state.data, state.options, renderer=self.renderer)

    def undo(self, number: int = 1) -> "Cite | None":
        """Get a copy of the collection as it was ``number`` changes ago."""
        return self.retrieve_version(self.current_version() - number)

    # Changes

    def options(self, options: dict[str, Any], log: bool = True) -> "Cite":
        """Update instance-level output options.

        Unknown option names are dropped with a warning.
        """
        for key, value in options.items():
            if key not in OPTION_KEYS:
                logger.warning(f"Ignoring unknown output option: {key}")
                continue
            self._options[key] = value

        if log:
            self._record("options")
        return self

    def add(self, data: Any, log: bool = True) -> "Cite":
        """Append entries to the collection."""
        self.data.extend(self._normalize(data))
        if log:
            self._record("add")
        return self

    def set(self, data: Any, log: bool = True) -> "Cite":
        """Replace the entries of the collection."""
        self.data = self._normalize(data)
        if log:
            self._record("set")
        return self

    def reset(self, log: bool = True) -> "Cite":
        """Remove all entries and instance-level options."""
        self.data = []
        self._options = {}
        if log:
            self._record("reset")
        return self

    def sort(self, log: bool = True) -> "Cite":
        """Order entries by citation label."""
        encoder = BibtexEncoder()
        self.data.sort(key=lambda entry: encoder.label(entry).lower())
        if log:
            self._record("sort")
        return self

    def _normalize(self, data: Any) -> list[dict[str, Any]]:
        """Copy input into a list of entries with IDs."""
        if isinstance(data, Cite):
            entries = data.data
        elif isinstance(data, dict):
            entries = [data]
        elif isinstance(data, list | tuple):
            entries = list(data)
        else:
            raise TypeError(f"Expected entries, got {type(data).__name__}")

        result = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise TypeError(f"Expected entry mapping, got {type(entry).__name__}")
            entry = copy.deepcopy(entry)
            if entry.get("id") in (None, ""):
                entry["id"] = f"temp_id_{uuid.uuid4().hex[:12]}"
            result.append(entry)
        return result

    # Output

    def get_ids(self) -> list[str]:
        """IDs of the entries, in collection order."""
        return [entry["id"] for entry in self.data]

    def get(self, options: dict[str, Any] | None = None, **overrides: Any) -> Any:
        """Get formatted output.

        Args:
            options: Output options for this call.
            **overrides: Same as ``options``, taking precedence over it.

        Options:
            format: ``"real"`` (parsed JSON, rendered HTML nodes) or
                ``"string"``. Default ``"real"``.
            type: ``"json"``, ``"html"`` or ``"string"``. Default ``"json"``.
            style: ``"csl"``, ``"bibtex"`` or ``"citation-<style>"``,
                e.g. ``"citation-apa"``. Default ``"csl"``.
            lang: RFC 5646 language of the output. Default ``"en-US"``.
            locale: Custom locale JSON for the citation engine.
            template: Custom style template JSON for the citation engine.

        Returns:
            The formatted data, or None for an invalid type/style combination.
        """
        call = {**(options or {}), **overrides}
        resolved = resolve_options(self._options, call)
        return format_output(self.data, resolved, self.renderer)
