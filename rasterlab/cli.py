"""Command-line front end for the rasterisation, clipping and transform routines."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rasterlab.circles import midpoint_circle
from rasterlab.clipping import ClipWindow, cohen_sutherland_clip, liang_barsky_clip
from rasterlab.lines import bresenham_line, dda_line
from rasterlab.transforms import (
    rotate_point,
    rotate_shape,
    scale_point,
    scale_shape,
    translate_point,
    translate_shape,
)

REJECTED = "Line is outside the window and rejected"


def _fmt(point: Sequence[float]) -> str:
    return f"({point[0]}, {point[1]})"


def _fmt_shape(points: Sequence[Sequence[float]]) -> str:
    return " ".join(_fmt(p) for p in points)


def _add_transform_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--translate", nargs=2, type=int, default=[0, 0], metavar=("TX", "TY"))
    parser.add_argument("--scale", nargs=2, type=float, default=[1.0, 1.0], metavar=("SX", "SY"))
    parser.add_argument("--rotate", type=float, default=0.0, metavar="DEGREES")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rasterlab", description="Raster graphics algorithms on the command line."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("bresenham", help="rasterise a line with Bresenham's algorithm")
    p.add_argument("coords", nargs=4, type=int, metavar=("X0", "Y0", "X1", "Y1"))

    p = commands.add_parser("dda", help="rasterise a line with the DDA")
    p.add_argument("coords", nargs=4, type=int, metavar=("X1", "Y1", "X2", "Y2"))

    p = commands.add_parser("circle", help="rasterise a circle with the midpoint algorithm")
    p.add_argument("coords", nargs=3, type=int, metavar=("XC", "YC", "RADIUS"))

    p = commands.add_parser("cohen", help="clip a line with Cohen-Sutherland")
    p.add_argument(
        "coords", nargs=8, type=int,
        metavar=("XMIN", "YMIN", "XMAX", "YMAX", "X1", "Y1", "X2", "Y2"),
    )

    p = commands.add_parser("liang", help="clip a line with Liang-Barsky")
    p.add_argument(
        "coords", nargs=8, type=float,
        metavar=("XMIN", "YMIN", "XMAX", "YMAX", "X0", "Y0", "X1", "Y1"),
    )

    p = commands.add_parser("point", help="translate, scale and rotate a point")
    p.add_argument("coords", nargs=2, type=int, metavar=("X", "Y"))
    _add_transform_options(p)

    p = commands.add_parser("triangle", help="translate, scale and rotate a triangle")
    p.add_argument("coords", nargs=6, type=int, metavar=("X1", "Y1", "X2", "Y2", "X3", "Y3"))
    _add_transform_options(p)

    return parser


def _run(args: argparse.Namespace) -> list[str]:
    c = args.coords
    if args.command == "bresenham":
        return [_fmt(p) for p in bresenham_line(*c)]
    if args.command == "dda":
        return [_fmt(p) for p in dda_line(*c)]
    if args.command == "circle":
        return [f"{_fmt(p)} {color}" for *p, color in midpoint_circle(*c)]
    if args.command in ("cohen", "liang"):
        window = ClipWindow(*c[:4])
        clip = cohen_sutherland_clip if args.command == "cohen" else liang_barsky_clip
        result = clip(window, *c[4:])
        if result is None:
            return [REJECTED]
        x0, y0, x1, y1 = (int(v) for v in result)
        return [f"Line after clipping: {_fmt((x0, y0))} - {_fmt((x1, y1))}"]
    tx, ty = args.translate
    sx, sy = args.scale
    if args.command == "point":
        x, y = c
        return [
            f"Original: {_fmt((x, y))}",
            f"Translated: {_fmt(translate_point(x, y, tx, ty))}",
            f"Scaled: {_fmt(scale_point(x, y, sx, sy))}",
            f"Rotated: {_fmt(rotate_point(x, y, args.rotate))}",
        ]
    triangle = list(zip(c[0::2], c[1::2]))
    return [
        f"Original: {_fmt_shape(triangle)}",
        f"Translated: {_fmt_shape(translate_shape(triangle, tx, ty))}",
        f"Scaled: {_fmt_shape(scale_shape(triangle, sx, sy))}",
        f"Rotated: {_fmt_shape(rotate_shape(triangle, args.rotate))}",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, run the chosen routine and print its result."""
    args = _build_parser().parse_args(argv)
    for line in _run(args):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())