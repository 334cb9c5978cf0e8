"""Module entry point for ``python -m glitcha``."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
