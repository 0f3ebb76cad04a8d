"""Link resolver.

Validates plain web links without touching the network.
"""

from urllib.parse import urlsplit

from listhub.core.errors import EntryResolveFailedError
from listhub.models.entry import Entry
from listhub.resolvers.base import EntryResolver


class LinkResolver(EntryResolver):
    """Resolver for 'link' entries.

    Checks that the 'url' attribute (or the id) is an http(s) URL with
    a host and records that host as 'domain'.
    """

    SUPPORTED_TYPES = ("link",)

    def supports(self, entry: Entry) -> bool:
        return entry.type in self.SUPPORTED_TYPES

    def is_cached(self, entry: Entry) -> bool:
        return False

    def resolve(self, entry: Entry, force: bool = False) -> None:
        url = entry.get("url") or entry.id
        parts = urlsplit(str(url))
        if parts.scheme not in ("http", "https") or not parts.hostname:
            msg = f"'{url}' is not an http(s) URL"
            raise EntryResolveFailedError(msg)

        entry.set("url", str(url))
        entry.set("domain", parts.hostname.lower().removeprefix("www."))
