"""Git remote resolver.

Verifies repository entries with 'git ls-remote' and records the commit
the remote HEAD points at. Results are cached per entry.
"""

import logging
import subprocess
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from listhub.core.cache import DEFAULT_TTL, ResolverCache
from listhub.core.errors import EntryResolveFailedError
from listhub.models.entry import Entry
from listhub.resolvers.base import EntryResolver
from listhub.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class GitRemoteResolver(EntryResolver):
    """Resolver for 'github' and 'git' entries.

    GitHub entries are resolved from their 'owner/repo' id; git entries
    need a 'url' attribute.
    """

    SUPPORTED_TYPES = ("github", "git")

    def __init__(
        self,
        cache_dir: Path | None = None,
        ttl: timedelta | None = DEFAULT_TTL,
        timeout: float = 30.0,
    ) -> None:
        self._cache = ResolverCache("git", cache_dir=cache_dir, ttl=ttl)
        self._timeout = timeout

    @property
    def cache(self) -> ResolverCache:
        return self._cache

    def supports(self, entry: Entry) -> bool:
        return entry.type in self.SUPPORTED_TYPES

    def is_cached(self, entry: Entry) -> bool:
        return self._cache.has(entry.id)

    def clear_cache(self) -> int:
        return self._cache.clear()

    def resolve(self, entry: Entry, force: bool = False) -> None:
        """Resolve the entry from the cache or the remote.

        Raises:
            EntryResolveFailedError: If git is missing or the remote
                cannot be queried.
        """
        data = None if force else self._cache.load(entry.id)
        if data is None:
            data = self._fetch(entry)
            try:
                self._cache.store(entry.id, data)
            except (OSError, RuntimeError) as e:
                logger.warning("Could not cache resolution of %s: %s", entry.id, e)

        entry.merge(data)

    def remote_url(self, entry: Entry) -> str:
        """Return the remote URL to query for the entry."""
        url = entry.get("url")
        if isinstance(url, str) and url:
            return url
        if entry.type == "github":
            return f"https://github.com/{entry.id}"
        msg = f"Entry '{entry.id}' has no url attribute"
        raise EntryResolveFailedError(msg)

    def _fetch(self, entry: Entry) -> dict[str, Any]:
        if not command_exists("git"):
            msg = "git is not available on this system"
            raise EntryResolveFailedError(msg)

        url = self.remote_url(entry)
        try:
            result = run_command(
                ["git", "ls-remote", url, "HEAD"],
                timeout=self._timeout,
                env={"GIT_TERMINAL_PROMPT": "0"},
            )
        except subprocess.TimeoutExpired as e:
            msg = f"git ls-remote timed out after {self._timeout:.0f}s"
            raise EntryResolveFailedError(msg) from e
        except OSError as e:
            msg = f"git ls-remote failed: {e}"
            raise EntryResolveFailedError(msg) from e

        if not result.success:
            msg = f"git ls-remote failed: {result.stderr.strip() or 'unknown error'}"
            raise EntryResolveFailedError(msg)

        head = self._parse_head(result.stdout)
        if head is None:
            msg = f"Remote {url} has no HEAD"
            raise EntryResolveFailedError(msg)

        return {
            "url": url,
            "head": head,
            "resolved_at": datetime.now(UTC).isoformat(),
        }

    @staticmethod
    def _parse_head(output: str) -> str | None:
        """Extract the HEAD sha from ls-remote output."""
        for line in output.strip().split("\n"):
            parts = line.split("\t")
            if len(parts) == 2 and parts[1].strip() == "HEAD" and parts[0].strip():
                return parts[0].strip()
        return None
