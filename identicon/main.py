"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from identicon import __version__
from identicon.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.identicon_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Identicon",
        description="Deterministic 3x3 tile identicons rendered as PNG",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from identicon.api import image
    from identicon.api.router import api_router

    app.include_router(api_router)
    # Catch-all image route goes last so /api/* wins.
    app.include_router(image.router)

    return app


app = create_app()
