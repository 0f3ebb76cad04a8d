"""Abstract base class for entry resolvers.

Resolvers enrich or validate a single entry after the list has been
processed, possibly serving results from a cache.
"""

from abc import ABC, abstractmethod

from listhub.models.entry import Entry


class EntryResolver(ABC):
    """Abstract base class for all entry resolvers.

    The first resolver supporting an entry resolves it. Resolvers raise
    EntryResolveFailedError for entries that cannot be resolved; such
    entries are removed from the list.
    """

    @property
    def name(self) -> str:
        """Resolver name used in log messages."""
        return type(self).__name__

    @abstractmethod
    def supports(self, entry: Entry) -> bool:
        """Check if this resolver can resolve the entry."""

    @abstractmethod
    def is_cached(self, entry: Entry) -> bool:
        """Check if a fresh cached resolution exists for the entry."""

    def clear_cache(self) -> int:
        """Delete cached resolutions, returning how many were removed."""
        return 0

    @abstractmethod
    def resolve(self, entry: Entry, force: bool = False) -> None:
        """Resolve the entry in place.

        Args:
            entry: Entry to enrich.
            force: Bypass the cache.

        Raises:
            EntryResolveFailedError: If the entry cannot be resolved.
        """
