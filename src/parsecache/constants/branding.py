"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "parsecache"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: inspect and maintain the parsed-file artifact cache"
