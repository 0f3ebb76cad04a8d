"""Per-entry resolver cache.

Each resolved entry is stored as one JSON file under the cache
directory, named after a hash of the entry id:

    ~/.cache/listhub/<namespace>/<sha1(entry id)>.json
"""

import hashlib
import json
import logging
import os
from datetime import UTC, datetime, timedelta
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from listhub.core.paths import ensure_dir, get_cache_dir

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


class ResolverCache:
    """JSON file cache for resolver results.

    Attributes:
        directory: Directory holding the cache files.
        ttl: Maximum age of a cache record, None to never expire.
    """

    def __init__(
        self,
        namespace: str,
        cache_dir: Path | None = None,
        ttl: timedelta | None = DEFAULT_TTL,
    ) -> None:
        """Initialize the cache.

        Args:
            namespace: Subdirectory name, usually the resolver name.
            cache_dir: Override for the base cache directory.
            ttl: Maximum age of a record.
        """
        base = cache_dir if cache_dir is not None else get_cache_dir()
        self.directory = base / namespace
        self.ttl = ttl

    def path_for(self, entry_id: str) -> Path:
        digest = hashlib.sha1(entry_id.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.json"

    def _read(self, entry_id: str) -> dict[str, Any] | None:
        path = self.path_for(entry_id)
        if not path.exists():
            return None

        try:
            record = json.loads(path.read_text(encoding="utf-8"))
            stored_at = datetime.fromisoformat(record["stored_at"])
            data = record["data"]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring corrupt cache file %s: %s", path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring corrupt cache file %s: data is not a mapping", path)
            return None

        if self.ttl is not None and datetime.now(UTC) - stored_at > self.ttl:
            logger.debug("Cache record for %s expired", entry_id)
            return None

        return data

    def has(self, entry_id: str) -> bool:
        """Check if a fresh record exists for the entry."""
        return self._read(entry_id) is not None

    def load(self, entry_id: str) -> dict[str, Any] | None:
        """Load a fresh record, or None on a miss."""
        return self._read(entry_id)

    def store(self, entry_id: str, data: dict[str, Any]) -> Path:
        """Store a record atomically.

        Args:
            entry_id: Entry the data belongs to.
            data: JSON-serializable resolver output.

        Returns:
            Path of the cache file.

        Raises:
            RuntimeError: If the cache directory cannot be created.
            OSError: If the file cannot be written.
        """
        ensure_dir(self.directory, "cache")
        path = self.path_for(entry_id)
        record = {
            "id": entry_id,
            "stored_at": datetime.now(UTC).isoformat(),
            "data": data,
        }

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self.directory,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                json.dump(record, f, indent=2)
            os.replace(str(tmp_path), str(path))
        except OSError:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise

        return path

    def clear(self) -> int:
        """Delete all records in this cache.

        Returns:
            Number of files removed.
        """
        if not self.directory.exists():
            return 0
        removed = 0
        for path in self.directory.glob("*.json"):
            path.unlink()
            removed += 1
        return removed
