"""An in-memory raster canvas with the drawing primitives of a classic graphics screen."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

from rasterlab.circles import midpoint_circle
from rasterlab.lines import bresenham_line


class Color(IntEnum):
    """The sixteen-colour palette."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class Canvas:
    """A fixed-size grid of coloured pixels; drawing outside it is silently clipped."""

    def __init__(self, width: int = 640, height: int = 480) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: dict[tuple[int, int], Color] = {}

    @property
    def max_x(self) -> int:
        """The largest valid x coordinate."""
        return self.width - 1

    @property
    def max_y(self) -> int:
        """The largest valid y coordinate."""
        return self.height - 1

    @property
    def max_color(self) -> Color:
        """The highest colour of the palette."""
        return max(Color)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int = Color.WHITE) -> None:
        """Set one pixel; points off the canvas are ignored."""
        if not self._inside(x, y):
            return
        color = Color(color)
        if color is Color.BLACK:
            self._pixels.pop((x, y), None)
        else:
            self._pixels[(x, y)] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour of one pixel; points off the canvas read as black."""
        return self._pixels.get((x, y), Color.BLACK)

    def line(self, x0: int, y0: int, x1: int, y1: int, color: int = Color.WHITE) -> None:
        """Draw a straight line between two points, both included."""
        for x, y in bresenham_line(x0, y0, x1, y1):
            self.put_pixel(x, y, color)

    def circle(self, x_center: int, y_center: int, radius: int, color: int = Color.WHITE) -> None:
        """Draw the outline of a circle."""
        for x, y, _ in midpoint_circle(x_center, y_center, radius):
            self.put_pixel(x, y, color)

    def rectangle(
        self, left: int, top: int, right: int, bottom: int, color: int = Color.WHITE
    ) -> None:
        """Draw the outline of an axis-aligned rectangle."""
        self.polygon([(left, top), (right, top), (right, bottom), (left, bottom)], color)

    def polygon(self, points: Iterable[Sequence[int]], color: int = Color.WHITE) -> None:
        """Draw a closed outline through the given vertices."""
        vertices = [(int(x), int(y)) for x, y in points]
        if not vertices:
            return
        if len(vertices) == 1:
            self.put_pixel(*vertices[0], color)
            return
        for (x0, y0), (x1, y1) in zip(vertices, vertices[1:] + vertices[:1]):
            self.line(x0, y0, x1, y1, color)

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels.clear()

    def render(self) -> str:
        """Return the canvas as text: '.' for black, a hex digit for any other colour."""
        rows = (
            "".join(
                "." if (c := self.get_pixel(x, y)) is Color.BLACK else format(int(c), "X")
                for x in range(self.width)
            )
            for y in range(self.height)
        )
        return "\n".join(rows)


def draw_concentric_circles(canvas: Canvas) -> None:
    """Draw two circles of radius 100 and 150 around the centre of the canvas."""
    mid_x = canvas.max_x // 2
    mid_y = canvas.max_y // 2
    color = canvas.max_color
    canvas.circle(mid_x, mid_y, 100, color)
    canvas.circle(mid_x, mid_y, 150, color)


def draw_hut(canvas: Canvas) -> None:
    """Draw a hut: a square body with a pointed roof."""
    canvas.rectangle(150, 200, 300, 350, Color.WHITE)
    canvas.line(150, 200, 225, 100, Color.WHITE)
    canvas.line(225, 100, 300, 200, Color.WHITE)


def draw_star(canvas: Canvas) -> None:
    """Draw a six-pointed star from two overlapping triangles."""
    color = canvas.max_color
    segments = (
        (350, 300, 450, 300),
        (350, 300, 400, 250),
        (400, 250, 450, 300),
        (400, 320, 350, 265),
        (350, 265, 450, 265),
        (445, 265, 400, 320),
    )
    for x0, y0, x1, y1 in segments:
        canvas.line(x0, y0, x1, y1, color)