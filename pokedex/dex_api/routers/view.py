"""Filter view endpoints exposing the cached catalog."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_filter_view
from ..rendering import build_card
from ..schemas import PokemonCardModel, SearchUpdate, ViewStateModel
from ..services import CatalogLoadError, FilterView

router = APIRouter(prefix="/view", tags=["view"])


def snapshot(view: FilterView) -> ViewStateModel:
    """Serialize the current view state, rendering a card per visible record."""

    return ViewStateModel(
        status=view.status,
        loading=view.loading,
        error=view.error,
        search_term=view.search_term,
        total=len(view.catalog),
        visible_count=len(view.visible),
        items=[build_card(pokemon) for pokemon in view.visible],
    )


@router.get("", response_model=ViewStateModel)
async def get_view(view: FilterView = Depends(get_filter_view)) -> ViewStateModel:
    """Return the loading flag, search term and visible cards."""

    return snapshot(view)


@router.put("/search", response_model=ViewStateModel)
async def update_search(
    payload: SearchUpdate, view: FilterView = Depends(get_filter_view)
) -> ViewStateModel:
    """Replace the search term and return the recomputed visible subset."""

    view.set_search_term(payload.term)
    return snapshot(view)


@router.post("/reload", response_model=ViewStateModel, summary="Reload the catalog from PokeAPI")
async def reload_catalog(view: FilterView = Depends(get_filter_view)) -> ViewStateModel:
    """Fetch a fresh catalog and replace the cached one wholesale."""

    try:
        await view.reload()
    except CatalogLoadError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return snapshot(view)


@router.get("/pokemon/{pokemon_id}", response_model=PokemonCardModel)
async def get_pokemon(pokemon_id: int, view: FilterView = Depends(get_filter_view)) -> PokemonCardModel:
    """Return a single catalog record, raising when missing."""

    pokemon = view.get(pokemon_id)
    if pokemon is None:
        raise HTTPException(status_code=404, detail="Pokémon not found")
    return build_card(pokemon)
