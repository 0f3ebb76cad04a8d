"""Events emitted by source processors while processing a source."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from listhub.models.entry import Entry

StatusLevel = Literal["info", "error"]


@dataclass(frozen=True, slots=True)
class StatusUpdate:
    """Progress message from a processor.

    Error-level updates are logged as warnings and never stop the run.
    """

    message: str
    level: StatusLevel = "info"

    @property
    def is_error(self) -> bool:
        return self.level == "error"


@dataclass(frozen=True, slots=True)
class EntryCreated:
    """A fully formed entry discovered by a processor."""

    entry: Entry


ProcessorEvent = StatusUpdate | EntryCreated

# Callback handed to SourceProcessor.process()
Emit = Callable[[ProcessorEvent], None]
