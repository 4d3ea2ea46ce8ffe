"""Midpoint circle rasterisation with eight-way symmetry."""

from __future__ import annotations

Pixel = tuple[int, int, int]

# Colour index used for each of the eight symmetric points, in plotting order.
_OCTANT_COLORS = (2, 3, 4, 5, 6, 7, 8, 9)


def octant_points(x: int, y: int, x_center: int, y_center: int) -> list[Pixel]:
    """Return the eight symmetric pixels of offset (x, y) as (px, py, color)."""
    offsets = (
        (x, -y),
        (-x, -y),
        (x, y),
        (-x, y),
        (y, -x),
        (-y, -x),
        (y, x),
        (-y, x),
    )
    return [
        (x_center + ox, y_center + oy, color)
        for (ox, oy), color in zip(offsets, _OCTANT_COLORS)
    ]


def midpoint_circle(x_center: int, y_center: int, radius: int) -> list[Pixel]:
    """Return the pixels plotted by the midpoint circle algorithm, in order."""
    x, y = radius, 0
    decision = 1 - radius
    pixels = octant_points(x, y, x_center, y_center)
    while x > y:
        y += 1
        if decision <= 0:
            decision += 2 * y + 1
        else:
            x -= 1
            decision += 2 * y - 2 * x + 1
        if x < y:
            break
        pixels.extend(octant_points(x, y, x_center, y_center))
    return pixels