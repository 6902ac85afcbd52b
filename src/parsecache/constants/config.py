"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "parsecache.yaml"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"cache_directory", "schema_files"})
