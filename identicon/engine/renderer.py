"""Composition engine — lay out the 3x3 tile grid for a code.

Center tile first, then the four sides (top, right, bottom, left) and the
four corners (top-left, top-right, bottom-right, bottom-left). Each
successive side/corner turns one more quarter, which gives the image its
4-fold rotational symmetry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from identicon.engine.code import derive_code
from identicon.engine.recipe import decode
from identicon.engine.surface import Surface
from identicon.engine.tile import draw_tile

logger = logging.getLogger(__name__)

GRID_CELLS = 3
CENTER = (1, 1)
SIDES = ((1, 0), (2, 1), (1, 2), (0, 1))
CORNERS = ((0, 0), (2, 0), (2, 2), (0, 2))


@dataclass(frozen=True)
class RenderSettings:
    # One or two colors
    two_color: bool = True
    # Opacity applied to every fill color, 0-255
    alpha: int = 255


def default_settings() -> RenderSettings:
    """Recommended settings: two colors, fully opaque."""
    return RenderSettings(two_color=True, alpha=255)


def render(
    code: int,
    total_size: int,
    settings: RenderSettings | None = None,
) -> NDArray[np.uint8]:
    """Render the identicon for `code` as a (total_size, total_size, 4) RGBA array.

    `total_size` should be divisible by 3 to avoid antialiasing seams between
    tiles; other sizes still render. Sizes <= 0 give an empty buffer.
    """
    settings = settings or default_settings()
    recipe = decode(code)

    primary = recipe.primary_rgba(settings.alpha)
    secondary = recipe.secondary_rgba(settings.alpha) if settings.two_color else primary
    # swap_cross set -> center takes the primary color
    middle_color = primary if recipe.swap_cross else secondary

    size = max(int(total_size), 0)
    surface = Surface(size, size)
    tile_size = size / GRID_CELLS
    logger.debug("Rendering code %#018x at %dpx (tile %.3fpx)", code, size, tile_size)

    draw_tile(CENTER, 0, recipe.middle_invert, recipe.middle_type, middle_color, surface, tile_size)
    for i, pos in enumerate(SIDES):
        draw_tile(
            pos,
            recipe.side_turn + 1 + i,
            recipe.side_invert,
            recipe.side_type,
            primary,
            surface,
            tile_size,
        )
    for i, pos in enumerate(CORNERS):
        draw_tile(
            pos,
            recipe.corner_turn + 1 + i,
            recipe.corner_invert,
            recipe.corner_type,
            secondary,
            surface,
            tile_size,
        )

    return surface.to_array()


def render_identicon(
    text: str,
    total_size: int,
    settings: RenderSettings | None = None,
) -> NDArray[np.uint8]:
    """Derive the code for `text` and render it."""
    return render(derive_code(text), total_size, settings)
