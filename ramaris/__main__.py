"""Entry point for ``python -m ramaris``."""

from __future__ import annotations

import sys

from ramaris.cli import main

if __name__ == "__main__":
    sys.exit(main())
