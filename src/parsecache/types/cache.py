"""Typed cache payload structures."""

from __future__ import annotations

from typing import TypedDict

from parsecache.types.common import JsonValue


class CacheEntryPayload(TypedDict):
    """A single cache entry as persisted to disk."""

    version: int
    fingerprint: str
    payload: JsonValue
