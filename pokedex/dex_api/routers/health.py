"""Health endpoints."""
from fastapi import APIRouter, Depends

from ..dependencies import get_filter_view
from ..schemas import CatalogHealthStatus, HealthStatus
from ..services import FilterView

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
async def get_health(view: FilterView = Depends(get_filter_view)) -> HealthStatus:
    """Return service heartbeat information."""

    catalog_status = CatalogHealthStatus(
        status=view.status, size=len(view.catalog), detail=view.error
    )
    return HealthStatus(catalog=catalog_status)
