"""Two-dimensional point and shape transformations with integer results."""

from __future__ import annotations

import math
from collections.abc import Iterable

PI = 3.14159

Point = tuple[int, int]


def translate_point(x: int, y: int, tx: int, ty: int) -> Point:
    """Move (x, y) by (tx, ty)."""
    return (x + tx, y + ty)


def scale_point(x: int, y: int, sx: float, sy: float) -> Point:
    """Scale (x, y) about the origin, truncating toward zero."""
    return (int(x * sx), int(y * sy))


def rotate_point(x: int, y: int, angle: float) -> Point:
    """Rotate (x, y) about the origin by angle degrees, truncating toward zero."""
    rad = angle * PI / 180.0
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return (int(x * cos_a - y * sin_a), int(x * sin_a + y * cos_a))


def translate_shape(points: Iterable[Point], tx: int, ty: int) -> list[Point]:
    """Translate every vertex of a shape."""
    return [translate_point(x, y, tx, ty) for x, y in points]


def scale_shape(points: Iterable[Point], sx: float, sy: float) -> list[Point]:
    """Scale every vertex of a shape about the origin."""
    return [scale_point(x, y, sx, sy) for x, y in points]


def rotate_shape(points: Iterable[Point], angle: float) -> list[Point]:
    """Rotate every vertex of a shape about the origin."""
    return [rotate_point(x, y, angle) for x, y in points]