"""Drawing surface — an SVG-backed canvas rasterized with CairoSVG.

Each path is filled with the nonzero winding rule and carries the active
transforms, outermost first, as its own `transform` attribute. The surface
is owned by a single render call and rasterized once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import numpy as np
from numpy.typing import NDArray

from identicon.utils.rasterizer import empty_buffer, rasterize_svg

logger = logging.getLogger(__name__)

Point = tuple[float, float]
Color = tuple[int, int, int, int]


def _fmt(value: float) -> str:
    """Compact decimal for SVG attributes."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def path_data(subpaths: Sequence[Sequence[Point]]) -> str:
    """SVG path `d` attribute: one closed subpath per vertex list."""
    parts = []
    for points in subpaths:
        if not points:
            continue
        (x0, y0), *rest = points
        cmds = [f"M{_fmt(x0)} {_fmt(y0)}"]
        cmds.extend(f"L{_fmt(x)} {_fmt(y)}" for x, y in rest)
        cmds.append("Z")
        parts.append(" ".join(cmds))
    return " ".join(parts)


class Surface:
    """A width x height canvas of filled paths."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._transforms: list[str] = []
        self._elements: list[str] = []

    @contextmanager
    def transform(
        self,
        translate: Point = (0.0, 0.0),
        rotate_deg: float = 0.0,
        center: Point = (0.0, 0.0),
    ) -> Iterator[Surface]:
        """Translate, then rotate about `center` (in translated coordinates).

        The previous transform is restored when the block exits, on every
        exit path.
        """
        tx, ty = translate
        cx, cy = center
        parts = [f"translate({_fmt(tx)} {_fmt(ty)})"]
        if rotate_deg:
            parts.append(f"rotate({_fmt(rotate_deg)} {_fmt(cx)} {_fmt(cy)})")
        self._transforms.append(" ".join(parts))
        try:
            yield self
        finally:
            self._transforms.pop()

    @property
    def depth(self) -> int:
        """Number of active transforms."""
        return len(self._transforms)

    def fill_path(self, subpaths: Sequence[Sequence[Point]], color: Color) -> None:
        """Fill the union of closed subpaths with `color` (nonzero rule)."""
        d = path_data(subpaths)
        if not d:
            return
        r, g, b, a = color
        attrs = [
            f'd="{d}"',
            f'fill="rgb({r},{g},{b})"',
            f'fill-opacity="{_fmt(a / 255)}"',
            'fill-rule="nonzero"',
        ]
        if self._transforms:
            attrs.append(f'transform="{" ".join(self._transforms)}"')
        self._elements.append(f"  <path {' '.join(attrs)} />")

    def to_svg(self) -> str:
        lines = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}"'
            f' viewBox="0 0 {self.width} {self.height}">',
            *self._elements,
            "</svg>",
        ]
        return "\n".join(lines)

    def to_array(self) -> NDArray[np.uint8]:
        """Rasterize to an (height, width, 4) RGBA buffer."""
        if self.width <= 0 or self.height <= 0:
            return empty_buffer(self.width, self.height)
        logger.debug(
            "Rasterizing %dx%d surface (%d paths)",
            self.width,
            self.height,
            len(self._elements),
        )
        return rasterize_svg(self.to_svg(), self.width, self.height)
