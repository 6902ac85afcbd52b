"""Persistent, content-addressed cache for parsed-file artifacts."""

from __future__ import annotations

from parsecache.config import CacheConfig, load_config
from parsecache.store import ArtifactCodec, CacheStats, CacheStore, DataclassCodec, JsonCodec

__version__ = "0.1.0"

__all__ = [
    "ArtifactCodec",
    "CacheConfig",
    "CacheStats",
    "CacheStore",
    "DataclassCodec",
    "JsonCodec",
    "__version__",
    "load_config",
]
