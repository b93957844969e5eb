"""FastAPI router for the search endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from signal_scout.dependencies import get_scout_service
from signal_scout.models import PlatformInfo, SearchResponse
from signal_scout.platforms.registry import PLATFORM_CATALOG
from signal_scout.services.scout import SignalScoutService

router = APIRouter()


@router.post("/api/search", response_model=SearchResponse)
async def search(
    payload: Any = Body(...),
    service: SignalScoutService = Depends(get_scout_service),
) -> SearchResponse:
    """Scout a topic across the selected platforms."""
    return await service.handle(payload)


@router.get("/api/platforms", response_model=list[PlatformInfo])
async def list_platforms() -> list[PlatformInfo]:
    """List supported platforms in precedence order."""
    return list(PLATFORM_CATALOG)
