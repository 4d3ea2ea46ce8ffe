"""Line rasterisation: Bresenham's integer algorithm and the DDA."""

from __future__ import annotations

Point = tuple[int, int]


def _round_half_up(value: float) -> int:
    """Add one half and truncate toward zero."""
    return int(value + 0.5)


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> list[Point]:
    """Return the pixels of the line from (x0, y0) to (x1, y1), both ends included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    x, y = x0, y0
    points: list[Point] = []
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return points


def dda_line(x1: int, y1: int, x2: int, y2: int) -> list[Point]:
    """Return the pixels of the line from (x1, y1) to (x2, y2) by the DDA."""
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [(x1, y1)]
    x_increment = dx / steps
    y_increment = dy / steps
    x, y = float(x1), float(y1)
    points: list[Point] = []
    for _ in range(steps + 1):
        points.append((_round_half_up(x), _round_half_up(y)))
        x += x_increment
        y += y_increment
    return points