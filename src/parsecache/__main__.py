"""Allow ``python -m parsecache``."""

from parsecache.cli.main import main

raise SystemExit(main())
