"""Configuration-related exceptions."""

from __future__ import annotations

from parsecache.exceptions.base import ParseCacheError


class ConfigurationError(ParseCacheError, ValueError):
    """Raised when cache configuration is missing or invalid."""
