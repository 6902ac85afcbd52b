"""Shared exception hierarchy for parsecache."""

from __future__ import annotations

from .base import ParseCacheError
from .cache import CacheDecodeError, InvalidIdentityError, SchemaFileMissingError
from .config import ConfigurationError

__all__ = [
    "CacheDecodeError",
    "ConfigurationError",
    "InvalidIdentityError",
    "ParseCacheError",
    "SchemaFileMissingError",
]
