"""Shared pytest fixtures for cache store tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from parsecache.config import CacheConfig
from parsecache.store import CacheStore


@pytest.fixture()
def schema_files(tmp_path: Path) -> tuple[Path, ...]:
    """Create the files whose timestamps seed the producer version."""
    schema_dir = tmp_path / "schema"
    schema_dir.mkdir()
    paths = (schema_dir / "file_storage.py", schema_dir / "function_storage.py")
    for path in paths:
        path.write_text("# artifact shape\n", encoding="utf-8")
    return paths


@pytest.fixture()
def cache_root(tmp_path: Path) -> Path:
    """Return a cache root that does not exist yet."""
    return tmp_path / "cache"


@pytest.fixture()
def cache_config(cache_root: Path, schema_files: tuple[Path, ...]) -> CacheConfig:
    """Return a fully configured cache config."""
    return CacheConfig(cache_directory=cache_root, schema_files=schema_files)


@pytest.fixture()
def store(cache_config: CacheConfig) -> CacheStore:
    """Return a store using the default JSON codec."""
    return CacheStore(cache_config)
