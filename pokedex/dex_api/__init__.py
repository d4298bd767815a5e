"""FastAPI service hosting the in-memory Pokédex catalog."""

from .app import create_app

__all__ = ["create_app"]
