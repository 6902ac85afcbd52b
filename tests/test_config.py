"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from parsecache.config import CacheConfig, load_config
from parsecache.exceptions import ConfigurationError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == CacheConfig()
    assert loaded.file_cache_directory is None


def test_load_config_resolves_relative_paths(tmp_path: Path) -> None:
    (tmp_path / "parsecache.yaml").write_text(
        "cache_directory: .cache\nschema_files:\n  - model/file_storage.py\n  - /abs/function_storage.py\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    root = tmp_path.resolve()
    assert loaded.cache_directory == root / ".cache"
    assert loaded.file_cache_directory == root / ".cache" / "file_cache"
    assert loaded.schema_files == (root / "model" / "file_storage.py", Path("/abs/function_storage.py"))


def test_load_config_explicit_path(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("cache_directory: /var/cache/app\n", encoding="utf-8")

    loaded = load_config(tmp_path, config_path)

    assert loaded.cache_directory == Path("/var/cache/app")
    assert loaded.schema_files == ()


def test_load_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_load_config_empty_file(tmp_path: Path) -> None:
    (tmp_path / "parsecache.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == CacheConfig()


def test_load_config_blank_cache_directory_means_unconfigured(tmp_path: Path) -> None:
    (tmp_path / "parsecache.yaml").write_text('cache_directory: "  "\n', encoding="utf-8")

    assert load_config(tmp_path).cache_directory is None


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("cache_directory: [a, b]\n", "cache_directory"),
        ("schema_files: model.py\n", "schema_files"),
        ("schema_files: [1, 2]\n", "schema_files"),
        ("cache_dir: .cache\n", "cache_dir"),
        ("- just\n- a list\n", "YAML mapping"),
        ("cache_directory: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "non_string_directory",
        "schema_files_not_list",
        "schema_files_not_strings",
        "unknown_key",
        "not_mapping",
        "invalid_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "parsecache.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=expected_match):
        load_config(tmp_path, config_path)
