"""Allow ``python -m tcalc``."""

from .cli import main

raise SystemExit(main())
