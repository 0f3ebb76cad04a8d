"""List result model for JSON export.

This module defines the data structure for exporting a processed list
(entries and categories) with proper metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from listhub.core.entry_list import EntryList


@dataclass(frozen=True, slots=True)
class ResultMetadata:
    """Metadata for a list result.

    Attributes:
        list_id: Lower-cased list id.
        name: Display name of the list, if any.
        timestamp: ISO format timestamp of the export.
        listhub_version: Version of listhub that built the list.
        processed: Whether the list was processed.
        resolved: Whether the list was resolved.
    """

    list_id: str
    name: str | None
    timestamp: str
    listhub_version: str
    processed: bool
    resolved: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.list_id,
            "name": self.name,
            "timestamp": self.timestamp,
            "listhub_version": self.listhub_version,
            "processed": self.processed,
            "resolved": self.resolved,
        }


@dataclass(frozen=True, slots=True)
class ListResult:
    """Complete list result for export.

    Attributes:
        metadata: Result metadata.
        entries: Serialized entries in discovery order.
        categories: Serialized categories ordered by id.
        summary: Entry and category counts.
    """

    metadata: ResultMetadata
    entries: list[dict[str, Any]]
    categories: list[dict[str, Any]]
    summary: dict[str, Any] = field(default_factory=lambda: {})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "entries": self.entries,
            "categories": self.categories,
            "summary": self.summary,
        }

    @classmethod
    def create(cls, entry_list: EntryList) -> ListResult:
        """Create a ListResult from a list with auto-generated metadata.

        Args:
            entry_list: Processed (and optionally resolved) list.

        Returns:
            ListResult with populated metadata and summary.
        """
        from listhub import __version__

        entries = [entry.to_dict() for entry in entry_list.entries.values()]
        categories = [
            category.to_dict()
            for _, category in sorted(entry_list.categories.items())
        ]

        # Count entries by type
        types: dict[str, int] = {}
        for entry in entries:
            types[entry["type"]] = types.get(entry["type"], 0) + 1
        summary = {"entries": len(entries), "categories": len(categories), "types": types}

        metadata = ResultMetadata(
            list_id=entry_list.id,
            name=entry_list.definition.name,
            timestamp=datetime.now(UTC).isoformat(),
            listhub_version=__version__,
            processed=entry_list.processed,
            resolved=entry_list.resolved,
        )

        return cls(metadata=metadata, entries=entries, categories=categories, summary=summary)
