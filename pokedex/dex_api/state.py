"""Shared state container for the Pokédex API."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from .services import CatalogLoader, FilterView
from .settings import DexSettings


@dataclass(slots=True)
class AppState:
    """Encapsulates mutable application state shared across routers."""

    settings: DexSettings
    loader: CatalogLoader
    view: FilterView

    def __init__(
        self, settings: DexSettings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self.settings = settings
        self.loader = CatalogLoader.from_settings(settings, transport=transport)
        self.view = FilterView(self.loader)
