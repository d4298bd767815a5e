"""Console entry point for ``pokedex-cli``."""
from __future__ import annotations

from .app import app


def main() -> None:
    app(prog_name="pokedex-cli")


if __name__ == "__main__":
    main()
