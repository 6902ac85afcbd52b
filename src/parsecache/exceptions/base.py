"""Base exception for parsecache."""

from __future__ import annotations


class ParseCacheError(Exception):
    """Root of every error raised by parsecache."""
