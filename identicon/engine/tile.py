"""Tile renderer — draw one catalog shape into one grid cell."""

from __future__ import annotations

from identicon.engine.shapes import GRID_UNITS, INVERT_SQUARE, get_shape
from identicon.engine.surface import Color, Point, Surface
from identicon.utils.geometry import scale_points

_QUARTER_TURN_DEG = 90.0


def draw_tile(
    position: Point,
    turn: int,
    invert: bool,
    shape_index: int,
    color: Color,
    surface: Surface,
    tile_size: float,
) -> None:
    """Fill catalog shape `shape_index` into the tile at grid `position`.

    The tile is rotated `turn` quarter turns clockwise about its center. When
    `invert` is set the whole tile square is added as a second subpath of
    opposite winding, so the nonzero fill leaves the shape's complement.
    """
    turn %= 4
    col, row = position
    unit = tile_size / GRID_UNITS

    subpaths = [scale_points(get_shape(shape_index), unit)]
    if invert:
        subpaths.append(scale_points(INVERT_SQUARE, unit))

    with surface.transform(
        translate=(col * tile_size, row * tile_size),
        rotate_deg=turn * _QUARTER_TURN_DEG,
        center=(tile_size / 2, tile_size / 2),
    ):
        surface.fill_path(subpaths, color)
