"""Persistent per-file artifact cache with fingerprint-based invalidation.

Each entry lives at ``<cache_root>/file_cache/<sha256(lowercased identity)>``
and carries the fingerprint of the identity, the raw content it was derived
from and the producer-version seed. A read whose fingerprint no longer
matches deletes the entry and reports a miss.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from parsecache.config import CacheConfig
from parsecache.constants.cache import (
    CACHE_DIRECTORY_MODE,
    ENTRY_FORMAT_VERSION,
    ENTRY_TEMP_PREFIX,
    ENTRY_TEMP_SUFFIX,
)
from parsecache.exceptions import CacheDecodeError, ConfigurationError
from parsecache.io import load_json_file, remove_file, write_json_atomic
from parsecache.store.codec import ArtifactCodec, JsonCodec
from parsecache.store.keys import cache_key, compute_fingerprint, normalize_identity, producer_seed
from parsecache.types import CacheEntryPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheStats:
    """Size summary of the entry directory."""

    directory: Path
    entries: int
    total_bytes: int


class CacheStore:
    """Reads, writes and invalidates cached artifacts on disk."""

    def __init__(self, config: CacheConfig, codec: ArtifactCodec[Any] | None = None) -> None:
        self._config = config
        self._codec: ArtifactCodec[Any] = codec if codec is not None else JsonCodec()
        self._producer_seed = producer_seed(config.schema_files)

    @property
    def producer_seed(self) -> str:
        """Schema timestamps captured when the store was built."""
        return self._producer_seed

    @property
    def directory(self) -> Path:
        """Directory holding the entry files."""
        directory = self._config.file_cache_directory
        if directory is None:
            raise ConfigurationError("No cache directory defined")
        return directory

    def entry_path(self, identity: str) -> Path:
        """Return where the entry for ``identity`` is stored."""
        return self.directory / cache_key(normalize_identity(identity))

    def write(self, identity: str, raw_content: str | bytes, artifact: Any) -> None:
        """Persist ``artifact`` as the cached result for ``identity`` and ``raw_content``."""
        normalized = normalize_identity(identity)
        directory = self.directory
        path = directory / cache_key(normalized)
        entry: CacheEntryPayload = {
            "version": ENTRY_FORMAT_VERSION,
            "fingerprint": compute_fingerprint(normalized, raw_content, self._producer_seed),
            "payload": self._codec.encode(artifact),
        }

        directory.mkdir(mode=CACHE_DIRECTORY_MODE, parents=True, exist_ok=True)
        write_json_atomic(
            path=path,
            payload=entry,
            temp_prefix=ENTRY_TEMP_PREFIX,
            temp_suffix=ENTRY_TEMP_SUFFIX,
        )
        logger.debug("Cached %s as %s", normalized, path.name)

    def read(self, identity: str, raw_content: str | bytes) -> Any | None:
        """Return the cached artifact, or ``None`` on a miss.

        Missing, corrupt and stale entries are all misses. Stale entries are
        deleted before returning.
        """
        normalized = normalize_identity(identity)
        path = self.directory / cache_key(normalized)
        if not path.is_file():
            return None

        entry = self._load_entry(path)
        if entry is None:
            return None

        if entry["fingerprint"] != compute_fingerprint(normalized, raw_content, self._producer_seed):
            logger.debug("Stale cache entry for %s, removing %s", normalized, path.name)
            remove_file(path)
            return None

        try:
            return self._codec.decode(entry["payload"])
        except CacheDecodeError as exc:
            logger.warning("Ignoring undecodable cache entry %s: %s", path, exc)
            return None

    def invalidate(self, identity: str) -> bool:
        """Delete the entry for ``identity`` whatever its fingerprint."""
        return remove_file(self.entry_path(identity))

    def clear(self) -> int:
        """Delete every entry file and return how many were removed."""
        directory = self.directory
        if not directory.is_dir():
            return 0

        removed = 0
        for path in sorted(directory.iterdir()):
            if path.is_file() and remove_file(path):
                removed += 1
        logger.info("Removed %d cache entries from %s", removed, directory)
        return removed

    def stats(self) -> CacheStats:
        """Count entries and bytes currently on disk."""
        directory = self.directory
        entries = 0
        total_bytes = 0
        if directory.is_dir():
            for path in directory.iterdir():
                if not path.is_file() or path.name.startswith(ENTRY_TEMP_PREFIX):
                    continue
                entries += 1
                total_bytes += path.stat().st_size
        return CacheStats(directory=directory, entries=entries, total_bytes=total_bytes)

    def _load_entry(self, path: Path) -> CacheEntryPayload | None:
        try:
            raw = load_json_file(path)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable cache entry %s: %s", path, exc)
            return None

        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed cache entry %s: not a mapping", path)
            return None
        if raw.get("version") != ENTRY_FORMAT_VERSION:
            logger.warning("Ignoring cache entry %s with format version %r", path, raw.get("version"))
            return None
        fingerprint = raw.get("fingerprint")
        if not isinstance(fingerprint, str) or "payload" not in raw:
            logger.warning("Ignoring malformed cache entry %s: missing fingerprint or payload", path)
            return None

        return {
            "version": ENTRY_FORMAT_VERSION,
            "fingerprint": fingerprint,
            "payload": raw["payload"],
        }
