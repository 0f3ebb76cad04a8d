"""Source processors for list definitions.

This module exports the processor classes that expand list sources
into entries or child sources.
"""

from listhub.processors.base import ProcessingAction, SourceProcessor
from listhub.processors.inline import InlineProcessor
from listhub.processors.list_file import ListFileProcessor
from listhub.processors.markdown import MarkdownProcessor

__all__ = [
    "InlineProcessor",
    "ListFileProcessor",
    "MarkdownProcessor",
    "ProcessingAction",
    "SourceProcessor",
]
