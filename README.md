# rasterlab

Textbook raster graphics algorithms in plain Python, with no dependencies
outside the standard library.

| Module | What it provides |
| --- | --- |
| `rasterlab.lines` | `bresenham_line`, `dda_line` |
| `rasterlab.circles` | `midpoint_circle`, `octant_points` |
| `rasterlab.clipping` | `ClipWindow`, `RegionCode`, `cohen_sutherland_clip`, `liang_barsky_clip`, `clip_test` |
| `rasterlab.transforms` | `translate_point`, `scale_point`, `rotate_point`, `translate_shape`, `scale_shape`, `rotate_shape` |
| `rasterlab.canvas` | `Canvas`, `Color`, `draw_concentric_circles`, `draw_hut`, `draw_star` |
| `rasterlab.cli` | the `rasterlab` command |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Lines and circles

```python
from rasterlab.lines import bresenham_line, dda_line
from rasterlab.circles import midpoint_circle

print(bresenham_line(0, 0, 3, 1))   # [(0, 0), (1, 0), (2, 1), (3, 1)]
pixels = dda_line(10, 10, 20, 15)
ring = midpoint_circle(50, 50, 20)
```

Both line functions return the list of `(x, y)` pixels from the first end
point to the second, both ends included. `dda_line` rounds each coordinate by
adding one half and truncating.

`midpoint_circle` returns `(x, y, color)` triples in the order they are
plotted. Each step of the algorithm contributes the eight symmetric points
given by `octant_points`, tagged with the colour indices 2 to 9, one per
octant.

## Clipping

```python
from rasterlab.clipping import ClipWindow, cohen_sutherland_clip, liang_barsky_clip

window = ClipWindow(10, 10, 100, 100)
print(window.region_code(150, 50))                    # RegionCode.RIGHT

print(cohen_sutherland_clip(window, 0, 50, 200, 50))  # (10, 50, 100, 50)
print(liang_barsky_clip(window, 0, 50, 200, 50))      # (10.0, 50.0, 100.0, 50.0)
```

`ClipWindow.region_code` returns the `RegionCode` outcode flags (`LEFT`,
`RIGHT`, `BOTTOM`, `TOP`, or `INSIDE`) of a point.

Both clippers return the visible part of the segment as a 4-tuple, or `None`
when the whole segment is rejected. `cohen_sutherland_clip` computes
intersections with division truncated toward zero, as for integer
coordinates; `liang_barsky_clip` works in floating point. `clip_test` is the
single boundary test Liang–Barsky is built from: it returns the narrowed
`(t1, t2)` or `None`.

## Transforms

```python
from rasterlab.transforms import (
    translate_point, scale_point, rotate_point,
    translate_shape, scale_shape, rotate_shape,
)

print(translate_point(10, 20, 5, -5))   # (15, 15)
print(scale_point(10, 20, 1.5, 2.0))    # (15, 40)

triangle = [(0, 0), (40, 0), (20, 30)]
print(rotate_shape(triangle, 45))
```

Scaling and rotation are about the origin, and their results are truncated
toward zero to integers. Rotation angles are in degrees and are converted with
π taken as 3.14159, so results near a whole number can land one below it:
`rotate_point(10, 0, 90)` gives `(0, 9)`.

## Canvas

```python
from rasterlab.canvas import Canvas, Color, draw_hut

canvas = Canvas(80, 40)
canvas.line(0, 0, 30, 10, Color.WHITE)
canvas.circle(40, 20, 8, Color.RED)
canvas.rectangle(5, 20, 25, 35, Color.GREEN)
print(canvas.render())
```

`Canvas(width=640, height=480)` is an in-memory grid of pixels coloured from
the sixteen-colour `Color` palette. It offers `put_pixel`, `get_pixel`,
`line`, `circle`, `rectangle`, `polygon` and `clear`, plus `max_x`, `max_y`
and `max_color`. Anything drawn off the canvas is silently dropped.
`render()` returns the picture as text, one row per line: `.` for black and a
hexadecimal digit for any other colour.

`draw_concentric_circles`, `draw_hut` and `draw_star` draw fixed pictures
onto a canvas; they are laid out for the default 640×480 size.

## Command line

The `rasterlab` command runs one algorithm on the numbers given as arguments
and prints the result as text:

```
rasterlab bresenham X0 Y0 X1 Y1
rasterlab dda X1 Y1 X2 Y2
rasterlab circle XC YC RADIUS
rasterlab cohen XMIN YMIN XMAX YMAX X1 Y1 X2 Y2
rasterlab liang XMIN YMIN XMAX YMAX X0 Y0 X1 Y1
rasterlab point X Y [--translate TX TY] [--scale SX SY] [--rotate DEGREES]
rasterlab triangle X1 Y1 X2 Y2 X3 Y3 [--translate TX TY] [--scale SX SY] [--rotate DEGREES]
```

- `bresenham` and `dda` print one `(x, y)` pixel per line; `circle` prints
  `(x, y) color` per pixel.
- `cohen` and `liang` print `Line after clipping: (x0, y0) - (x1, y1)` with
  integer coordinates, or `Line is outside the window and rejected`.
- `point` and `triangle` print the original, translated, scaled and rotated
  coordinates. Each transform is applied to the original figure on its own;
  they are not chained. The defaults are no translation, a scale of 1 and a
  rotation of 0 degrees.

Run `rasterlab --help` or `rasterlab <command> --help` for details.

## What it does not do

There is no graphics window: nothing is shown on screen. The command line
prints coordinates only, and the `Canvas` renders to text. The command does
not prompt for input; all values are passed as arguments.