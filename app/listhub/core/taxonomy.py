"""Category taxonomy builder.

Turns slash-delimited category labels such as 'Tools/Command Line' into
a tree of Category records keyed by their normalized slug path.
"""

import logging
import re
from collections.abc import Iterator, Mapping

from anyascii import anyascii

from listhub.models.category import DEFAULT_CATEGORY_ORDER, Category

logger = logging.getLogger(__name__)

_NON_SLUG_CHARS = re.compile(r"[^\w\-]", re.ASCII)
_REPEATED_HYPHENS = re.compile(r"-{2,}")


def slugify(value: str) -> str:
    """Convert a title into an ASCII, lower-case, hyphenated token.

    Args:
        value: Title to convert (e.g. 'Command Line').

    Returns:
        Slug string (e.g. 'command-line').
    """
    text = anyascii(value)
    text = _NON_SLUG_CHARS.sub(" ", text).strip()
    text = text.replace(" ", "-").lower()
    return _REPEATED_HYPHENS.sub("-", text).strip("-")


def _title_case(segment: str) -> str:
    """Trim a path segment and upper-case its first letter only."""
    segment = segment.strip()
    return segment[:1].upper() + segment[1:]


class CategoryTree:
    """Incrementally built category tree.

    Categories are created lazily by :meth:`insert` and pruned by
    :meth:`release` once no entry references them anymore. The id
    counter belongs to the tree so independent lists never share ids.
    """

    def __init__(self) -> None:
        self._categories: dict[int, Category] = {}
        self._by_path: dict[str, int] = {}
        self._last_insert = 0

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories.values())

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._categories

    @property
    def categories(self) -> dict[int, Category]:
        """Categories keyed by id."""
        return self._categories

    def get(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def find(self, path: str) -> Category | None:
        """Find a category by its normalized path."""
        category_id = self._by_path.get(path)
        return None if category_id is None else self._categories[category_id]

    def insert(self, label: str, count: Mapping[str, int] | None = None) -> list[int]:
        """Insert a category label and all of its ancestors.

        Existing categories get their title overwritten and their counters
        incremented by count; missing ones are created.

        Args:
            label: Slash-delimited category label (e.g. 'Tools/CLI').
            count: Counter deltas, e.g. {"all": 1, "github": 1}.

        Returns:
            Category ids for every path level, root to leaf.
        """
        count = count or {}
        path: list[str] = []
        ids: list[int] = []

        for segment in label.strip("/").split("/"):
            title = _title_case(segment)
            slug = slugify(title)
            if not slug:
                logger.warning(
                    "Skipping category segment %r of %r without a slug", segment, label
                )
                continue

            parent_path = "/".join(path)
            path.append(slug)
            path_string = "/".join(path)

            category_id = self._by_path.get(path_string)
            if category_id is not None:
                category = self._categories[category_id]
                category.title = title
                for key, value in count.items():
                    category.count[key] = category.count.get(key, 0) + value
                ids.append(category_id)
                continue

            self._last_insert += 1
            category_id = self._last_insert
            self._categories[category_id] = Category(
                id=category_id,
                title=title,
                path=path_string,
                parent=self._by_path.get(parent_path) if parent_path else None,
                count=dict(count),
            )
            self._by_path[path_string] = category_id
            ids.append(category_id)

        return ids

    def release(self, category_id: int, entry_type: str) -> bool:
        """Decrement the counters of a category for one removed entry.

        The category is deleted once its 'all' counter drops below 1.

        Args:
            category_id: Category to decrement.
            entry_type: Type of the removed entry.

        Returns:
            True if the category was deleted.
        """
        category = self._categories.get(category_id)
        if category is None:
            return False

        category.count["all"] = category.count.get("all", 0) - 1
        category.count[entry_type] = category.count.get(entry_type, 0) - 1

        if category.count["all"] < 1:
            del self._categories[category_id]
            del self._by_path[category.path]
            logger.debug("Removed empty category %s", category.path)
            return True
        return False

    def apply_order(self, category_order: Mapping[str, int]) -> None:
        """Set each category's order from a path-to-priority mapping."""
        for category in self._categories.values():
            category.order = int(category_order.get(category.path, DEFAULT_CATEGORY_ORDER))
