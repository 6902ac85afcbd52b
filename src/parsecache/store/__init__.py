"""Disk-backed artifact cache."""

from __future__ import annotations

from parsecache.store.cache_store import CacheStats, CacheStore
from parsecache.store.codec import ArtifactCodec, DataclassCodec, JsonCodec
from parsecache.store.keys import cache_key, compute_fingerprint, normalize_identity, producer_seed

__all__ = [
    "ArtifactCodec",
    "CacheStats",
    "CacheStore",
    "DataclassCodec",
    "JsonCodec",
    "cache_key",
    "compute_fingerprint",
    "normalize_identity",
    "producer_seed",
]
