import math

import pytest

from rasterlab.transforms import (
    rotate_point,
    rotate_shape,
    scale_point,
    scale_shape,
    translate_point,
    translate_shape,
)

TRIANGLE = [(100, 100), (200, 100), (150, 30)]


def test_translate_point_round_trip():
    moved = translate_point(12, -7, 30, 45)
    assert translate_point(*moved, -30, -45) == (12, -7)


def test_translate_zero_is_identity():
    assert translate_point(5, 9, 0, 0) == (5, 9)


def test_scale_identity():
    assert scale_point(37, -12, 1.0, 1.0) == (37, -12)


def test_scale_integer_factor():
    assert scale_point(10, 20, 2, 3) == (20, 60)


def test_scale_truncates_toward_zero():
    assert scale_point(-3, 3, 0.5, 0.5) == (int(-1.5), int(1.5))


def test_rotate_zero_is_identity():
    assert rotate_point(40, -25, 0) == (40, -25)


@pytest.mark.parametrize("point", [(100, 0), (30, 40), (-70, 20), (55, -90)])
@pytest.mark.parametrize("angle", [15, 45, 90, 135.5, 270, -60])
def test_rotate_preserves_distance_approximately(point, angle):
    rx, ry = rotate_point(*point, angle)
    assert abs(math.hypot(rx, ry) - math.hypot(*point)) < 2


def test_rotate_quarter_turn_moves_x_axis_to_y_axis():
    rx, ry = rotate_point(100, 0, 90)
    assert abs(rx) <= 1
    assert 99 <= ry <= 100


def test_translate_shape_matches_points():
    assert translate_shape(TRIANGLE, 5, -10) == [
        translate_point(x, y, 5, -10) for x, y in TRIANGLE
    ]


def test_translate_shape_round_trip():
    assert translate_shape(translate_shape(TRIANGLE, 17, 23), -17, -23) == TRIANGLE


def test_scale_shape_matches_points():
    assert scale_shape(TRIANGLE, 1.5, 0.5) == [
        scale_point(x, y, 1.5, 0.5) for x, y in TRIANGLE
    ]


def test_rotate_shape_matches_points():
    assert rotate_shape(TRIANGLE, 30) == [rotate_point(x, y, 30) for x, y in TRIANGLE]


def test_shapes_accept_generators():
    assert len(rotate_shape(iter(TRIANGLE), 45)) == len(TRIANGLE)
    assert scale_shape((p for p in TRIANGLE), 1, 1) == TRIANGLE