"""Category model for the path-based taxonomy tree."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_CATEGORY_ORDER = 20


@dataclass(slots=True)
class Category:
    """A node in the category tree.

    Attributes:
        id: Category id, assigned from 1 in order of first sight.
        title: Human-readable title (last write wins).
        path: Normalized slug path, unique within a list.
        parent: Id of the parent category, or None for top-level categories.
        count: Entry tallies keyed by 'all' and by entry type.
        order: Display priority.
    """

    id: int
    title: str
    path: str
    parent: int | None = None
    count: dict[str, int] = field(default_factory=dict)
    order: int = DEFAULT_CATEGORY_ORDER

    @property
    def total(self) -> int:
        """Number of entry assignments to this category."""
        return self.count.get("all", 0)

    @property
    def depth(self) -> int:
        """Zero-based depth in the tree."""
        return self.path.count("/")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "path": self.path,
            "parent": self.parent,
            "count": dict(self.count),
            "order": self.order,
        }
