"""Shared type aliases for parsecache."""

from .cache import CacheEntryPayload
from .common import JsonObject, JsonScalar, JsonValue

__all__ = [
    "CacheEntryPayload",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
