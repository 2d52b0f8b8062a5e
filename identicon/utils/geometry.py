"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence


def scale_points(
    points: Sequence[tuple[float, float]],
    factor: float,
) -> list[tuple[float, float]]:
    """Uniformly scale a vertex list about the origin."""
    return [(x * factor, y * factor) for x, y in points]
