"""Config data model for the cache store."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from parsecache.constants.cache import FILE_CACHE_DIRECTORY


@dataclass(frozen=True)
class CacheConfig:
    """Resolved cache config.

    ``cache_directory`` is the cache root; ``None`` means caching has not
    been configured. ``schema_files`` lists the files whose modification
    times seed the producer-version fingerprint.
    """

    cache_directory: Path | None = None
    schema_files: tuple[Path, ...] = ()

    @property
    def file_cache_directory(self) -> Path | None:
        """Directory holding one file per cache entry."""
        if self.cache_directory is None:
            return None
        return self.cache_directory / FILE_CACHE_DIRECTORY
