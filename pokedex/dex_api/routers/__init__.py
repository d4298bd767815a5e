"""Router exports for the Pokédex API."""
from . import health, page, view

__all__ = ["health", "page", "view"]
