"""Configuration loading for the parsecache store."""

from __future__ import annotations

from parsecache.config.loader import load_config
from parsecache.config.model import CacheConfig

__all__ = ["CacheConfig", "load_config"]
