"""Cache storage exceptions."""

from __future__ import annotations

from parsecache.exceptions.base import ParseCacheError


class SchemaFileMissingError(ParseCacheError, RuntimeError):
    """Raised at store construction when a schema-defining file is absent.

    The producer-version seed cannot be computed without every schema file,
    so the store refuses to start.
    """


class CacheDecodeError(ParseCacheError, ValueError):
    """Raised when a persisted payload cannot be turned back into an artifact."""


class InvalidIdentityError(ParseCacheError, ValueError):
    """Raised when a cache identity is empty or not a string."""
