"""Inline source processor.

Handles sources whose data is a list of entries written directly in the
list definition:

    [[sources]]
    type = "inline"
    data = [{ id = "psf/requests", type = "github", categories = ["HTTP"] }]
"""

import logging

from listhub.models.entry import Entry
from listhub.models.events import Emit, EntryCreated, StatusUpdate
from listhub.models.source import Source
from listhub.processors.base import ProcessingAction, SourceProcessor

logger = logging.getLogger(__name__)


class InlineProcessor(SourceProcessor):
    """Processor for entries defined inline in the list definition.

    Items may be mappings or bare id strings. The 'entryType' source
    option sets the type of items that don't declare one.
    """

    SOURCE_TYPE = "inline"
    DEFAULT_ENTRY_TYPE = "link"

    def get_action(self, source: Source) -> ProcessingAction:
        if source.type == self.SOURCE_TYPE:
            return ProcessingAction.PROCESSING
        return ProcessingAction.SKIP

    def process(self, source: Source, emit: Emit) -> bool:
        """Emit one entry per inline item.

        Malformed items are reported as error status updates and skipped.

        Returns:
            False if the source data is not a list, True otherwise.
        """
        if not isinstance(source.data, list):
            emit(StatusUpdate("Inline source data must be a list of entries", level="error"))
            return False

        default_type = source.get_option("entryType", self.DEFAULT_ENTRY_TYPE)
        for index, item in enumerate(source.data):
            if isinstance(item, str):
                item = {"id": item}
            if not isinstance(item, dict):
                emit(StatusUpdate(f"Skipping inline entry #{index}: not a mapping", level="error"))
                continue

            try:
                entry = Entry.from_dict(item, default_type=default_type)
            except ValueError as e:
                emit(StatusUpdate(f"Skipping inline entry #{index}: {e}", level="error"))
                continue

            emit(StatusUpdate(f"Found entry {entry.id}"))
            emit(EntryCreated(entry))

        return True
