"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from identicon.engine.renderer import RenderSettings

# SHA-512("") ends in a538327af927da3e
EMPTY_STRING_CODE = 0xA538327AF927DA3E

# Field offsets, for building codes by hand
PRIMARY_BLUE = 17
PRIMARY_GREEN = 22
PRIMARY_RED = 27
SECOND_RED = 32
SECOND_GREEN = 37
SECOND_BLUE = 42
SWAP_CROSS = 47


def channel(value: int, offset: int) -> int:
    """Place a 5-bit channel value at `offset`."""
    return (value & 0x1F) << offset


# Full squares everywhere, red primary, blue secondary
RED_BLUE_CODE = channel(31, PRIMARY_RED) | channel(31, SECOND_BLUE)


@pytest.fixture
def two_color() -> RenderSettings:
    return RenderSettings(two_color=True, alpha=255)


@pytest.fixture
def one_color() -> RenderSettings:
    return RenderSettings(two_color=False, alpha=255)


# 9x9 render of "" (code 0xA538327AF927DA3E), alpha channel.
# Center: inverted small square. Sides: inverted notched triangle at turns
# 0, 1, 2, 3 (top, right, bottom, left). Corners: sharp triangle at turns
# 3, 0, 1, 2 (top-left, top-right, bottom-right, bottom-left). Values are
# exact polygon coverage * 255; 0 and 255 pixels are not antialiased.
EMPTY_STRING_ALPHA_9 = [
    [0, 159, 32, 255, 128, 255, 128, 64, 0],
    [64, 255, 159, 207, 128, 207, 64, 255, 159],
    [128, 64, 0, 64, 128, 64, 0, 159, 32],
    [255, 207, 64, 239, 191, 239, 64, 207, 255],
    [128, 128, 128, 191, 0, 191, 128, 128, 128],
    [255, 207, 64, 239, 191, 239, 64, 207, 255],
    [32, 159, 0, 64, 128, 64, 0, 64, 128],
    [159, 255, 64, 207, 128, 207, 159, 255, 64],
    [0, 64, 128, 255, 128, 255, 32, 159, 0],
]

_PRIMARY_RGB = (248, 32, 152)
_SECONDARY_RGB = (208, 152, 96)
# Sides use the primary color; corners and (swap_cross unset) center the secondary.
EMPTY_STRING_TILE_RGB = [
    [_SECONDARY_RGB, _PRIMARY_RGB, _SECONDARY_RGB],
    [_PRIMARY_RGB, _SECONDARY_RGB, _PRIMARY_RGB],
    [_SECONDARY_RGB, _PRIMARY_RGB, _SECONDARY_RGB],
]


def golden_buffer(alpha: list[list[int]], tile_rgb: list[list[tuple]], tile: int) -> NDArray[np.uint8]:
    """Expected RGBA buffer: tile color wherever alpha is nonzero, zeros elsewhere."""
    size = len(alpha)
    buf = np.zeros((size, size, 4), dtype=np.uint8)
    for y in range(size):
        for x in range(size):
            a = alpha[y][x]
            if a:
                buf[y, x, :3] = tile_rgb[y // tile][x // tile]
                buf[y, x, 3] = a
    return buf


def as_ring(points) -> NDArray[np.float64]:
    """Nx2 array of the polygon with its first vertex repeated at the end."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(pts) == 0:
        return pts
    return np.vstack([pts, pts[:1]])


def signed_area(ring: NDArray[np.float64]) -> float:
    """Shoelace area; positive runs clockwise on a y-down screen."""
    if len(ring) < 2:
        return 0.0
    x = ring[:, 0]
    y = ring[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def winding_direction(ring: NDArray[np.float64]) -> int:
    sa = signed_area(ring)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def tile_crop(buffer: NDArray, col: int, row: int, tile_size: int) -> NDArray:
    """Pixels of grid cell (col, row) for an integral tile size."""
    y0 = row * tile_size
    x0 = col * tile_size
    return buffer[y0:y0 + tile_size, x0:x0 + tile_size]
