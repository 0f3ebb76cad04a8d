"""Entry resolvers.

This module exports the resolver classes that enrich processed entries.
"""

from listhub.resolvers.base import EntryResolver
from listhub.resolvers.git import GitRemoteResolver
from listhub.resolvers.link import LinkResolver

__all__ = ["EntryResolver", "GitRemoteResolver", "LinkResolver"]
