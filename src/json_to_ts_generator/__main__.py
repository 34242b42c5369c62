"""Allow ``python -m json_to_ts_generator``."""

from __future__ import annotations

from .cli import main

raise SystemExit(main())
