"""Allow ``python -m minilang``."""

from minilang.cli import main

raise SystemExit(main())
