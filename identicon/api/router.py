"""Master API router — mounts the JSON endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from identicon.api import health, recipe

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(recipe.router)
