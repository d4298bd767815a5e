"""
Pokédex catalog viewer.

This package bundles the FastAPI service that loads the PokeAPI catalog
into memory and the Typer client that talks to it.
"""

__all__ = ["dex_api", "dex_cli"]
