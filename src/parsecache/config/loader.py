"""Config loading and normalization for the cache store."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from parsecache.config.model import CacheConfig
from parsecache.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME
from parsecache.exceptions import ConfigurationError


def load_config(root: Path, config_path: Path | None = None) -> CacheConfig:
    """Load cache config from ``parsecache.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigurationError(f"Config file not found: {path}")
        return CacheConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    return CacheConfig(
        cache_directory=_resolve_cache_directory(raw.get("cache_directory"), root),
        schema_files=tuple(
            _resolve_path(entry, root) for entry in _ensure_string_list(raw.get("schema_files", []), "schema_files")
        ),
    )


def _resolve_cache_directory(value: Any, root: Path) -> Path | None:
    """Resolve the cache root, treating an empty value as unconfigured."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError("cache_directory must be a string")
    if not value.strip():
        return None
    return _resolve_path(value.strip(), root)


def _resolve_path(value: str, root: Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigurationError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{key_name} must be a list of strings")
    return list(value)
