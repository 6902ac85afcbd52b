"""CLI entrypoint for parsecache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from parsecache import __version__
from parsecache.config import load_config
from parsecache.constants.branding import CLI_DESCRIPTION
from parsecache.exceptions import ConfigurationError, InvalidIdentityError, ParseCacheError
from parsecache.store import CacheStore


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="parsecache", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Show cache location, size and producer seed")
    _add_common_arguments(info)

    clear = subparsers.add_parser("clear", help="Remove every cache entry")
    _add_common_arguments(clear)

    key = subparsers.add_parser("key", help="Show the cache key and entry path for an identity")
    _add_common_arguments(key)
    key.add_argument("identity", help="Logical path of the cached source file")

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        store = CacheStore(load_config(args.root, args.config))
        if args.command == "info":
            return _handle_info(store)
        if args.command == "clear":
            return _handle_clear(store)
        if args.command == "key":
            return _handle_key(store, args.identity)
    except InvalidIdentityError as exc:
        print(f"Invalid identity: {exc}", file=sys.stderr)
        return 2
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ParseCacheError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_info(store: CacheStore) -> int:
    stats = store.stats()
    print(f"Cache directory: {stats.directory}")
    print(f"Entries: {stats.entries}")
    print(f"Total bytes: {stats.total_bytes}")
    print(f"Producer seed: {store.producer_seed.strip() or '(none)'}")
    return 0


def _handle_clear(store: CacheStore) -> int:
    removed = store.clear()
    print(f"Removed {removed} cache entries.")
    return 0


def _handle_key(store: CacheStore, identity: str) -> int:
    path = store.entry_path(identity)
    print(path.name)
    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
