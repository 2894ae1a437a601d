"""Module entrypoint for running Concordancer as ``python -m concordancer``."""

from __future__ import annotations

from concordancer.cli import main


if __name__ == "__main__":
    main()
