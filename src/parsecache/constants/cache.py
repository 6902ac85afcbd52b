"""Constants used by the file cache and hashing."""

from __future__ import annotations

ENTRY_FORMAT_VERSION: int = 1
FILE_CACHE_DIRECTORY: str = "file_cache"
CACHE_DIRECTORY_MODE: int = 0o777
ENTRY_TEMP_PREFIX: str = ".entry-"
ENTRY_TEMP_SUFFIX: str = ".tmp"

# Separates the identity from the content inside the fingerprint blob.
FINGERPRINT_SEPARATOR: str = " "
