"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from squircley.api import health, plugin, preview, shape

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(shape.router)
api_router.include_router(preview.router)
api_router.include_router(plugin.router)
