"""Module entrypoint for running Ctenar as ``python -m ctenar``."""

from __future__ import annotations

from ctenar.cli import main


if __name__ == "__main__":
    main()
