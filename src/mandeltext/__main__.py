"""Allow running the explorer with `python -m mandeltext`."""

from __future__ import annotations

import sys

from mandeltext.cli import main

sys.exit(main())
