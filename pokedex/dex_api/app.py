"""Application factory for the Pokédex API."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from .routers import health, page, view
from .settings import DexSettings
from .state import AppState


def create_app(
    settings: DexSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or DexSettings()
    app_state = AppState(settings=resolved_settings, transport=transport)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if resolved_settings.load_on_startup:
            app_state.view.mount()
        try:
            yield
        finally:
            await app_state.view.unmount()

    app = FastAPI(title="Pokédex API", version="0.1.0", lifespan=lifespan)
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    for router in (
        page.router,
        health.router,
        view.router,
    ):
        app.include_router(router)

    return app
