"""Service layer helpers for the PokeAPI integration."""

from .catalog_loader import (
    Catalog,
    CatalogLoader,
    CatalogLoadError,
    MalformedResponseError,
    TransientNetworkError,
)
from .filter_view import FilterView, filter_catalog

__all__ = [
    "Catalog",
    "CatalogLoader",
    "CatalogLoadError",
    "TransientNetworkError",
    "MalformedResponseError",
    "FilterView",
    "filter_catalog",
]
