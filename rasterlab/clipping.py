"""Line clipping against a rectangular window: Cohen-Sutherland and Liang-Barsky."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class RegionCode(IntFlag):
    """Outcode bits of a point relative to a clipping window."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


@dataclass(frozen=True)
class ClipWindow:
    """An axis-aligned clipping rectangle."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def region_code(self, x: float, y: float) -> RegionCode:
        """Return the outcode of (x, y) with respect to this window."""
        code = RegionCode.INSIDE
        if x < self.x_min:
            code |= RegionCode.LEFT
        elif x > self.x_max:
            code |= RegionCode.RIGHT
        if y < self.y_min:
            code |= RegionCode.BOTTOM
        elif y > self.y_max:
            code |= RegionCode.TOP
        return code


def _trunc_div(a, b):
    """Divide, rounding the quotient toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def cohen_sutherland_clip(window: ClipWindow, x1, y1, x2, y2):
    """Clip a segment with Cohen-Sutherland.

    Returns the clipped (x1, y1, x2, y2), or None when the segment is rejected.
    """
    code1 = window.region_code(x1, y1)
    code2 = window.region_code(x2, y2)
    while True:
        if not code1 and not code2:
            return (x1, y1, x2, y2)
        if code1 & code2:
            return None
        code_out = code1 if code1 else code2
        if code_out & RegionCode.TOP:
            x = x1 + _trunc_div((x2 - x1) * (window.y_max - y1), y2 - y1)
            y = window.y_max
        elif code_out & RegionCode.BOTTOM:
            x = x1 + _trunc_div((x2 - x1) * (window.y_min - y1), y2 - y1)
            y = window.y_min
        elif code_out & RegionCode.RIGHT:
            y = y1 + _trunc_div((y2 - y1) * (window.x_max - x1), x2 - x1)
            x = window.x_max
        else:
            y = y1 + _trunc_div((y2 - y1) * (window.x_min - x1), x2 - x1)
            x = window.x_min
        if code_out == code1:
            x1, y1 = x, y
            code1 = window.region_code(x1, y1)
        else:
            x2, y2 = x, y
            code2 = window.region_code(x2, y2)


def clip_test(p: float, q: float, t1: float, t2: float):
    """Apply one Liang-Barsky boundary test.

    Returns the narrowed (t1, t2), or None when the segment lies outside.
    """
    if p < 0.0:
        r = q / p
        if r > t2:
            return None
        if r > t1:
            t1 = r
    elif p > 0.0:
        r = q / p
        if r < t1:
            return None
        if r < t2:
            t2 = r
    elif q < 0.0:
        return None
    return (t1, t2)


def liang_barsky_clip(window: ClipWindow, x0, y0, x1, y1):
    """Clip a segment with Liang-Barsky.

    Returns the clipped (x0, y0, x1, y1) as floats, or None when rejected.
    """
    dx = x1 - x0
    dy = y1 - y0
    bounds: tuple[float, float] | None = (0.0, 1.0)
    for p, q in (
        (-dx, x0 - window.x_min),
        (dx, window.x_max - x0),
        (-dy, y0 - window.y_min),
        (dy, window.y_max - y0),
    ):
        bounds = clip_test(p, q, *bounds)
        if bounds is None:
            return None
    t1, t2 = bounds
    return (x0 + t1 * dx, y0 + t1 * dy, x0 + t2 * dx, y0 + t2 * dy)