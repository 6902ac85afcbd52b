"""Shared constants for parsecache."""
