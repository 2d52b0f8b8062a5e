"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from identicon import __version__
from identicon.engine.shapes import SHAPE_COUNT
from identicon.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shapes=SHAPE_COUNT,
    )
