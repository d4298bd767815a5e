"""HTML page with the search box and the card list."""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from ..dependencies import get_filter_view
from ..rendering import build_card, render_page
from ..services import FilterView, filter_catalog

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
async def index(
    search: str = Query(default="", description="Search text typed in the search box."),
    view: FilterView = Depends(get_filter_view),
) -> HTMLResponse:
    """Render the catalog page for one visitor.

    The search text only decides which cards start hidden in this response;
    the shared view's search term is left untouched.
    """

    term = search.lower()
    catalog = view.catalog
    html = render_page(
        loading=view.loading,
        error=view.error,
        search_term=term,
        cards=[build_card(pokemon) for pokemon in catalog],
        visible_ids={pokemon.id for pokemon in filter_catalog(catalog, term)},
    )
    return HTMLResponse(content=html)
