"""Command line interface for parsecache."""

from parsecache.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
