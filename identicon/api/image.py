"""GET /{identifier}.png — render an identicon as PNG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from identicon.config import Settings
from identicon.dependencies import get_settings
from identicon.engine.code import derive_code
from identicon.engine.renderer import RenderSettings, render
from identicon.utils.rasterizer import array_to_png

logger = logging.getLogger(__name__)

router = APIRouter()

_SUFFIX = ".png"


def parse_identifier(path: str) -> str:
    """Identifier from a single `<identifier>.png` path segment.

    Raises HTTPException(400) for nested paths or a missing suffix.
    """
    segments = path.split("/")
    if len(segments) != 1:
        raise HTTPException(status_code=400)
    item = segments[0]
    if not item.endswith(_SUFFIX):
        raise HTTPException(status_code=400)
    return item[: -len(_SUFFIX)]


@router.get("/{path:path}", response_class=Response)
def identicon_png(path: str, settings: Settings = Depends(get_settings)) -> Response:
    identifier = parse_identifier(path)

    code = derive_code(identifier)
    render_settings = RenderSettings(two_color=settings.two_color, alpha=settings.alpha)
    try:
        image = render(code, settings.image_size, render_settings)
        png = array_to_png(image)
    except Exception:
        logger.exception("unable to render identicon for '%s'", identifier)
        raise HTTPException(status_code=500)

    logger.info("creating identicon for '%s'", identifier)
    return Response(content=png, media_type="image/png")
