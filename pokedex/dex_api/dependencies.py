"""FastAPI dependencies for the Pokédex API."""
from fastapi import Depends, Request

from .services import FilterView
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_filter_view(app_state: AppState = Depends(get_app_state)) -> FilterView:
    """Return the filter view dependency."""
    return app_state.view
