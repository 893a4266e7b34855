"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from intentlens.dependencies import get_catalog
from intentlens.engine.catalog import RegionCatalog
from intentlens.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(catalog: RegionCatalog = Depends(get_catalog)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        images_registered=catalog.count,
    )
