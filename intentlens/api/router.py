"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from intentlens.api import health, intent_lens

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(intent_lens.router)
