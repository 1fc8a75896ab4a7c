"""Module entrypoint for running envbind as ``python -m envbind``."""

from __future__ import annotations

from envbind.cli import main


if __name__ == "__main__":
    main()
