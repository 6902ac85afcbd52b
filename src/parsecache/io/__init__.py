"""Shared file I/O helpers."""

from .files import file_mtime_ns, remove_file
from .json_io import load_json_file, write_json_atomic

__all__ = ["file_mtime_ns", "load_json_file", "remove_file", "write_json_atomic"]
