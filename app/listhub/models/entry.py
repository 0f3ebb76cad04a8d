"""Entry model for catalog items discovered from list sources.

An entry is identified by a lower-cased id. Entries discovered more than
once are merged into a single canonical instance.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Keys stored as dataclass fields rather than free-form attributes
_RESERVED_KEYS = ("id", "type", "categories")


def merge_value(current: Any, incoming: Any) -> Any:
    """Merge an incoming attribute value into the current one.

    Lists are unioned in arrival order, mappings are merged recursively
    and any other value is overwritten.

    Args:
        current: Value already stored on the entry.
        incoming: Newly discovered value.

    Returns:
        The merged value.
    """
    if isinstance(current, list) and isinstance(incoming, list):
        merged = list(current)
        for item in incoming:
            if item not in merged:
                merged.append(item)
        return merged

    if isinstance(current, dict) and isinstance(incoming, dict):
        merged_map = dict(current)
        for key, value in incoming.items():
            merged_map[key] = merge_value(merged_map[key], value) if key in merged_map else value
        return merged_map

    return incoming


@dataclass(slots=True)
class Entry:
    """A single catalog item.

    Attributes:
        id: Stable identity key, always lower-cased.
        type: Entry kind (e.g. 'github', 'link'), used to pick a resolver.
        categories: Category labels while processing, category ids afterwards.
        attributes: Free-form entry data (url, title, description, ...).
    """

    id: str
    type: str
    categories: list[Any] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize and validate entry identity."""
        if not isinstance(self.id, str) or not self.id.strip():
            msg = "Entry id cannot be empty"
            raise ValueError(msg)
        if not isinstance(self.type, str) or not self.type.strip():
            msg = f"Entry type cannot be empty (id={self.id!r})"
            raise ValueError(msg)
        self.id = self.id.strip().lower()
        self.type = self.type.strip()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_type: str | None = None) -> "Entry":
        """Create an entry from a plain mapping.

        Args:
            data: Mapping with 'id', optional 'type' and 'categories',
                and any other attributes.
            default_type: Type used when the mapping has none.

        Returns:
            New Entry instance.

        Raises:
            ValueError: If the id or type is missing.
        """
        attributes = {k: v for k, v in data.items() if k not in _RESERVED_KEYS}
        categories = data.get("categories") or []
        if isinstance(categories, str):
            categories = [categories]
        return cls(
            id=data.get("id", ""),
            type=data.get("type") or default_type or "",
            categories=list(categories),
            attributes=attributes,
        )

    def has(self, key: str) -> bool:
        """Check whether the entry holds a value for key."""
        return key in _RESERVED_KEYS or key in self.attributes

    def get(self, key: str, default: Any = None) -> Any:
        """Get a field or attribute value."""
        if key in _RESERVED_KEYS:
            return getattr(self, key)
        return self.attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a field or attribute value.

        Raises:
            ValueError: If trying to change the entry id.
        """
        if key == "id":
            msg = "Entry id is immutable"
            raise ValueError(msg)
        if key == "type":
            self.type = value
        elif key == "categories":
            self.categories = list(value)
        else:
            self.attributes[key] = value

    def merge(self, data: Mapping[str, Any]) -> None:
        """Merge attributes from another discovery of the same entry.

        The id is never changed. Scalars overwrite, lists are unioned and
        mappings merge recursively.

        Args:
            data: Mapping as produced by :meth:`to_dict`.
        """
        for key, value in data.items():
            if key == "id":
                continue
            if key == "categories":
                self.categories = merge_value(self.categories, list(value or []))
            elif key == "type":
                if value:
                    self.type = value
            elif key in self.attributes:
                self.attributes[key] = merge_value(self.attributes[key], value)
            else:
                self.attributes[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for merging and JSON serialization."""
        return {
            "id": self.id,
            "type": self.type,
            "categories": list(self.categories),
            **self.attributes,
        }
