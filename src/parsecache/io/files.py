"""File-level helpers for timestamps and removal."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def file_mtime_ns(path: Path) -> int:
    """Return the last-modified timestamp of a file in nanoseconds."""
    return int(path.stat().st_mtime_ns)


def remove_file(path: Path) -> bool:
    """Delete a file, tolerating races with other cleanups.

    Returns True when this call removed the file. A file that is already
    gone, or that cannot be removed, yields False.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.debug("Could not remove %s: %s", path, exc)
        return False
    return True
