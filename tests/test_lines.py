import pytest

from rasterlab.lines import bresenham_line, dda_line


def _is_connected(points):
    return all(
        max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1
        for a, b in zip(points, points[1:])
    )


@pytest.mark.parametrize(
    "start, end",
    [((0, 0), (10, 3)), ((5, 5), (-7, 2)), ((3, -4), (3, 9)), ((0, 0), (-6, -6)), ((2, 8), (9, 1))],
)
def test_bresenham_endpoints_and_connectivity(start, end):
    points = bresenham_line(*start, *end)
    assert points[0] == start
    assert points[-1] == end
    assert _is_connected(points)
    assert len(points) == max(abs(end[0] - start[0]), abs(end[1] - start[1])) + 1


def test_bresenham_single_point():
    assert bresenham_line(3, 4, 3, 4) == [(3, 4)]


def test_bresenham_horizontal():
    assert bresenham_line(0, 0, 5, 0) == [(x, 0) for x in range(6)]


def test_bresenham_vertical_downward():
    assert bresenham_line(2, 5, 2, 0) == [(2, y) for y in range(5, -1, -1)]


@pytest.mark.parametrize(
    "start, end",
    [((0, 0), (10, 3)), ((1, 1), (4, 12)), ((20, 20), (5, 14)), ((0, 0), (7, 7))],
)
def test_dda_endpoints_and_length(start, end):
    points = dda_line(*start, *end)
    assert points[0] == start
    assert points[-1] == end
    assert len(points) == max(abs(end[0] - start[0]), abs(end[1] - start[1])) + 1
    assert _is_connected(points)


def test_dda_degenerate_line():
    assert dda_line(7, 9, 7, 9) == [(7, 9)]


def test_dda_diagonal_matches_bresenham():
    assert dda_line(0, 0, 8, 8) == bresenham_line(0, 0, 8, 8)


def test_dda_horizontal():
    assert dda_line(1, 3, 6, 3) == [(x, 3) for x in range(1, 7)]