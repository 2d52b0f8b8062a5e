"""Shape catalog — the 16 tile polygons on a 4x4 grid.

Coordinates are grid units 0..4, y pointing down. Every non-empty shape is
traced with positive shoelace area; INVERT_SQUARE runs the opposite way so
that filling shape + square under the nonzero rule leaves the complement.
"""

from __future__ import annotations

Point = tuple[float, float]
Shape = tuple[Point, ...]

# Side length of the catalog grid.
GRID_UNITS = 4

PATH_SET: tuple[Shape, ...] = (
    # 0: full square
    ((0, 0), (4, 0), (4, 4), (0, 4)),
    # 1: right triangle pointing top-left
    ((0, 0), (4, 0), (0, 4)),
    # 2: upward triangle
    ((2, 0), (4, 4), (0, 4)),
    # 3: left half, standing rectangle
    ((0, 0), (2, 0), (2, 4), (0, 4)),
    # 4: diamond
    ((2, 0), (4, 2), (2, 4), (0, 2)),
    # 5: kite pointing top-left
    ((0, 0), (4, 2), (4, 4), (2, 4)),
    # 6: notched triangle (Sierpinski step)
    ((2, 0), (4, 4), (2, 4), (3, 2), (1, 2), (2, 4), (0, 4)),
    # 7: sharp triangle pointing top-left
    ((0, 0), (4, 2), (2, 4)),
    # 8: small centered square
    ((1, 1), (3, 1), (3, 3), (1, 3)),
    # 9: two small triangles
    ((2, 0), (4, 0), (0, 4), (0, 2), (2, 2)),
    # 10: small top-left square
    ((0, 0), (2, 0), (2, 2), (0, 2)),
    # 11: downward triangle on the bottom half
    ((0, 2), (4, 2), (2, 4)),
    # 12: upward triangle on the bottom half
    ((2, 2), (4, 4), (0, 4)),
    # 13: small triangle on the top-left, pointing bottom-right
    ((2, 0), (2, 2), (0, 2)),
    # 14: small triangle on the top-left, pointing top-left
    ((0, 0), (2, 0), (0, 2)),
    # 15: empty
    (),
)

# Center tile candidates: full square, diamond, small centered square, empty.
MIDDLE_PATCH_SET: tuple[int, ...] = (0, 4, 8, 15)

# Whole-tile subpath appended for inverted tiles:
# top-left -> bottom-left -> bottom-right -> top-right.
INVERT_SQUARE: Shape = ((0, 0), (0, 4), (4, 4), (4, 0))

SHAPE_COUNT = len(PATH_SET)


def get_shape(index: int) -> Shape:
    return PATH_SET[index]
