"""Tests for cache key, fingerprint and seed derivation."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from parsecache.exceptions import ParseCacheError, SchemaFileMissingError
from parsecache.store import cache_key, compute_fingerprint, normalize_identity, producer_seed


def test_cache_key_is_sha256_hex_of_identity() -> None:
    assert cache_key("src/foo.php") == hashlib.sha256(b"src/foo.php").hexdigest()


def test_normalize_identity_lowercases() -> None:
    assert normalize_identity("Src/Foo.PHP") == "src/foo.php"


@pytest.mark.parametrize("identity", ["", None, 42], ids=["empty", "none", "int"])
def test_normalize_identity_rejects_invalid(identity: object) -> None:
    with pytest.raises(ValueError):
        normalize_identity(identity)  # type: ignore[arg-type]


def test_fingerprint_hashes_identity_content_and_seed() -> None:
    expected = hashlib.sha256(b"src/foo.php <?php 1 2").hexdigest()

    assert compute_fingerprint("src/foo.php", "<?php", " 1 2") == expected


def test_fingerprint_changes_with_each_input() -> None:
    base = compute_fingerprint("a", "content", " 1")

    assert compute_fingerprint("b", "content", " 1") != base
    assert compute_fingerprint("a", "content2", " 1") != base
    assert compute_fingerprint("a", "content", " 2") != base


def test_producer_seed_joins_mtimes_with_leading_space(tmp_path: Path) -> None:
    first = tmp_path / "first.py"
    second = tmp_path / "second.py"
    first.write_text("a", encoding="utf-8")
    second.write_text("b", encoding="utf-8")
    os.utime(first, ns=(1_000, 1_700_000_000_000_000_000))
    os.utime(second, ns=(1_000, 1_700_000_001_000_000_000))

    assert producer_seed((first, second)) == " 1700000000000000000 1700000001000000000"


def test_producer_seed_empty_for_no_files() -> None:
    assert producer_seed(()) == ""


def test_producer_seed_requires_every_file(tmp_path: Path) -> None:
    present = tmp_path / "present.py"
    present.write_text("a", encoding="utf-8")

    with pytest.raises(SchemaFileMissingError, match="absent.py must exist"):
        producer_seed((present, tmp_path / "absent.py"))


def test_fingerprint_rejects_non_text_content() -> None:
    with pytest.raises(TypeError, match="str or bytes"):
        compute_fingerprint("a", 3, " 1")  # type: ignore[arg-type]


def test_invalid_identity_is_a_cache_error() -> None:
    with pytest.raises(ParseCacheError):
        normalize_identity("")
