"""Data models for listhub.

This module exports the core data structures used throughout the application.
"""

from listhub.models.category import Category
from listhub.models.definition import ListDefinition, ListOptions, SourceDefinition
from listhub.models.entry import Entry
from listhub.models.events import EntryCreated, ProcessorEvent, StatusUpdate
from listhub.models.result import ListResult, ResultMetadata
from listhub.models.source import Source, merge_options

__all__ = [
    "Category",
    "Entry",
    "EntryCreated",
    "ListDefinition",
    "ListOptions",
    "ListResult",
    "ProcessorEvent",
    "ResultMetadata",
    "Source",
    "SourceDefinition",
    "StatusUpdate",
    "merge_options",
]
