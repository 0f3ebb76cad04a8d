"""Shared types and utilities for CLI commands.

This module provides the default processor and resolver chains used
by the CLI commands.
"""

from datetime import timedelta
from enum import Enum
from pathlib import Path

from listhub.core.cache import DEFAULT_TTL
from listhub.processors.base import SourceProcessor
from listhub.processors.inline import InlineProcessor
from listhub.processors.list_file import ListFileProcessor
from listhub.processors.markdown import MarkdownProcessor
from listhub.resolvers.base import EntryResolver
from listhub.resolvers.git import GitRemoteResolver
from listhub.resolvers.link import LinkResolver


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_processors(base_dir: Path | None = None) -> list[SourceProcessor]:
    """Get the processor chain in priority order.

    Args:
        base_dir: Directory relative source paths are resolved against.

    Returns:
        List of processor instances.
    """
    return [
        ListFileProcessor(base_dir=base_dir),
        MarkdownProcessor(base_dir=base_dir),
        InlineProcessor(),
    ]


def get_resolvers(
    cache_dir: Path | None = None,
    ttl: timedelta | None = DEFAULT_TTL,
) -> list[EntryResolver]:
    """Get the resolver chain in priority order.

    Args:
        cache_dir: Override for the resolver cache directory.
        ttl: Maximum age of cached resolutions.

    Returns:
        List of resolver instances.
    """
    return [
        GitRemoteResolver(cache_dir=cache_dir, ttl=ttl),
        LinkResolver(),
    ]
