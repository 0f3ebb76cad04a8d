"""Abstract base class for source processors.

This module defines the SourceProcessor interface that every list
source processor must implement, and the dispatch actions a processor
can return for a given source.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import IntEnum
from pathlib import Path

from listhub.models.entry import Entry
from listhub.models.events import Emit
from listhub.models.source import Source

# Return type of SourceProcessor.process(): child sources when partially
# processing, optionally entries when processing, False on failure.
ProcessResult = Iterable[Source] | Source | Iterable[Entry] | bool | None


class ProcessingAction(IntEnum):
    """Dispatch verdict of a processor for a source."""

    SKIP = 0
    """Move on to the next processor."""

    PROCESSING = 1
    """Exclusively produce the final entries of the source."""

    PARTIAL_PROCESSING = 2
    """Expand the source into child sources processed recursively."""


class SourceProcessor(ABC):
    """Abstract base class for all source processors.

    Processors are tried in registration order; the first one that
    does not return SKIP for a source handles it.

    Example:
        >>> processor = InlineProcessor()
        >>> if processor.get_action(source) == ProcessingAction.PROCESSING:
        ...     processor.process(source, emit)
    """

    @property
    def name(self) -> str:
        """Processor name used in log messages."""
        return type(self).__name__

    @abstractmethod
    def get_action(self, source: Source) -> ProcessingAction:
        """Decide how this processor handles the source.

        Args:
            source: Source to inspect.

        Returns:
            ProcessingAction for the source.
        """

    @abstractmethod
    def process(self, source: Source, emit: Emit) -> ProcessResult:
        """Process the source.

        Entries are reported through emit as EntryCreated events,
        progress through StatusUpdate events.

        Args:
            source: Source claimed by get_action().
            emit: Event callback.

        Returns:
            Child sources for PARTIAL_PROCESSING, optionally entries for
            PROCESSING, or False on failure.
        """


def source_path(source: Source, base_dir: Path) -> Path:
    """Resolve a path-valued source payload against a base directory.

    Raises:
        ValueError: If the source data is not a path string.
    """
    if not isinstance(source.data, str) or not source.data.strip():
        msg = f"Source of type '{source.type}' expects a file path as data"
        raise ValueError(msg)
    path = Path(source.data).expanduser()
    return path if path.is_absolute() else base_dir / path
