"""Cache key, fingerprint and producer-version seed derivation."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from pathlib import Path

from parsecache.constants.cache import FINGERPRINT_SEPARATOR
from parsecache.exceptions import InvalidIdentityError, SchemaFileMissingError
from parsecache.io import file_mtime_ns


def normalize_identity(identity: str) -> str:
    """Lowercase an identity so keys are case-insensitive."""
    if not isinstance(identity, str) or not identity:
        raise InvalidIdentityError("identity must be a non-empty string")
    return identity.lower()


def cache_key(normalized_identity: str) -> str:
    """Return the entry filename for a normalized identity."""
    return hashlib.sha256(normalized_identity.encode("utf-8")).hexdigest()


def compute_fingerprint(normalized_identity: str, raw_content: str | bytes, seed: str) -> str:
    """Return the staleness fingerprint of ``identity + " " + content + seed``."""
    if isinstance(raw_content, str):
        content = raw_content.encode("utf-8")
    elif isinstance(raw_content, bytes):
        content = raw_content
    else:
        raise TypeError(f"raw_content must be str or bytes, got {type(raw_content).__name__}")
    digest = hashlib.sha256()
    digest.update(normalized_identity.encode("utf-8"))
    digest.update(FINGERPRINT_SEPARATOR.encode("utf-8"))
    digest.update(content)
    digest.update(seed.encode("utf-8"))
    return digest.hexdigest()


def producer_seed(schema_files: Iterable[Path]) -> str:
    """Build the producer-version seed from schema file timestamps.

    Each file contributes a space followed by its modification time in
    nanoseconds, so the seed starts with a space whenever any file is given.
    """
    seed = ""
    for path in schema_files:
        if not path.exists():
            raise SchemaFileMissingError(f"{path} must exist")
        seed += f" {file_mtime_ns(path)}"
    return seed
