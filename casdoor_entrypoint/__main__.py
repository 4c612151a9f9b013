"""Module entrypoint to run `python -m casdoor_entrypoint`."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
