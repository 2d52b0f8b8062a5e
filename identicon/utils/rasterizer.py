"""Rasterization utilities — SVG to RGBA pixel buffer, buffer to PNG."""

from __future__ import annotations

import io
import logging

import cairosvg
import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)

# RGBA
_CHANNELS = 4


def empty_buffer(width: int = 0, height: int = 0) -> NDArray[np.uint8]:
    """Fully transparent RGBA buffer."""
    return np.zeros((max(height, 0), max(width, 0), _CHANNELS), dtype=np.uint8)


def png_to_array(png_bytes: bytes) -> NDArray[np.uint8]:
    """Decode PNG bytes into an (H, W, 4) uint8 RGBA array."""
    return np.array(Image.open(io.BytesIO(png_bytes)).convert("RGBA"))


def rasterize_svg(svg_code: str, width: int, height: int) -> NDArray[np.uint8]:
    """Rasterize SVG markup to an RGBA numpy array using CairoSVG."""
    raw = svg_code.encode("utf-8")
    try:
        png_data = cairosvg.svg2png(
            bytestring=raw,
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to rasterize SVG (%dx%d): %s", width, height, e)
        raise
    return png_to_array(png_data)


def array_to_png(buffer: NDArray[np.uint8]) -> bytes:
    """Encode an (H, W, 4) RGBA array as PNG bytes."""
    out = io.BytesIO()
    Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8)).save(out, format="PNG")
    return out.getvalue()
