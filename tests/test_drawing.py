import math

import pytest

from graphkit.canvas import Canvas
from graphkit.drawing import (
    circle,
    fill_circle,
    fill_sector,
    fill_triangle,
    sector,
    sector_points,
    triangle,
)

WHITE = 0xFFFFFF
BLACK = 0x000000


def _painted(canvas):
    return {
        (x, y)
        for x in range(canvas.width)
        for y in range(canvas.height)
        if canvas.get_pixel(x, y) != WHITE
    }


def test_circle_zero_radius_plots_centre_only():
    canvas = Canvas(20, 20)
    circle(canvas, 10, 10, 0)
    assert _painted(canvas) == {(10, 10)}


def test_circle_hits_axis_extremes():
    canvas = Canvas(40, 40)
    circle(canvas, 20, 20, 8)
    for point in ((28, 20), (12, 20), (20, 28), (20, 12)):
        assert canvas.get_pixel(*point) == BLACK
    assert canvas.get_pixel(20, 20) == WHITE


def test_circle_points_lie_near_radius_and_are_symmetric():
    canvas = Canvas(40, 40)
    circle(canvas, 20, 20, 10)
    painted = _painted(canvas)
    assert painted
    for x, y in painted:
        assert abs(math.hypot(x - 20, y - 20) - 10) < 1.0
        assert (40 - x, y) in painted
        assert (x, 40 - y) in painted
        assert (y, x) in painted


def test_circle_partly_off_canvas_is_clipped():
    canvas = Canvas(10, 10)
    circle(canvas, 0, 0, 5)
    painted = _painted(canvas)
    assert (5, 0) in painted
    assert (0, 5) in painted
    assert all(0 <= x < 10 and 0 <= y < 10 for x, y in painted)


def test_fill_circle_contains_outline_and_interior():
    outline = Canvas(40, 40)
    circle(outline, 20, 20, 9)
    filled = Canvas(40, 40)
    fill_circle(filled, 20, 20, 9)
    disc = _painted(filled)
    assert _painted(outline) <= disc
    assert (20, 20) in disc
    assert (0, 0) not in disc
    for x, y in disc:
        assert math.hypot(x - 20, y - 20) < 10


def test_fill_circle_off_canvas_draws_nothing():
    canvas = Canvas(10, 10)
    fill_circle(canvas, -50, -50, 5)
    assert _painted(canvas) == set()


def test_fill_circle_uses_pen_colour():
    canvas = Canvas(20, 20)
    canvas.rgb_int(255, 0, 0)
    fill_circle(canvas, 10, 10, 3)
    assert canvas.get_pixel(10, 10) == 0xFF0000


def test_triangle_outline_touches_vertices_but_not_interior():
    canvas = Canvas(30, 30)
    triangle(canvas, 2, 2, 25, 2, 2, 25)
    for vertex in ((2, 2), (25, 2), (2, 25)):
        assert canvas.get_pixel(*vertex) == BLACK
    assert canvas.get_pixel(6, 6) == WHITE


def test_fill_triangle_fills_interior_only():
    canvas = Canvas(30, 30)
    fill_triangle(canvas, 2.7, 2.2, 25.9, 2.1, 2.4, 25.8)
    assert canvas.get_pixel(6, 6) == BLACK
    assert canvas.get_pixel(24, 24) == WHITE


def test_sector_points_tiny_sweep_uses_one_step():
    xs, ys = sector_points(5.0, 5.0, 2.0, 0.0, 0.0)
    assert len(xs) == 3
    assert xs[0] == pytest.approx(7.0)
    assert xs[1] == pytest.approx(7.0)
    assert (xs[2], ys[2]) == (5.0, 5.0)


def test_sector_points_step_count_capped():
    xs, _ = sector_points(0.0, 0.0, 1.0, 0.0, 2 * math.pi, 5000)
    assert len(xs) == 502


def test_sector_points_angles_end_at_end_radians():
    xs, ys = sector_points(0.0, 0.0, 3.0, 0.0, math.pi / 2)
    assert xs[-2] == pytest.approx(0.0, abs=1e-9)
    assert ys[-2] == pytest.approx(3.0)


@pytest.mark.parametrize("start,end", [(1.0, 0.5), (0.0, 2 * math.pi + 0.1)])
def test_sector_points_rejects_bad_sweep(start, end):
    with pytest.raises(ValueError):
        sector_points(0.0, 0.0, 1.0, start, end)


def test_sector_and_fill_sector_raise_on_bad_sweep():
    canvas = Canvas(10, 10)
    with pytest.raises(ValueError):
        sector(canvas, 5, 5, 3, 2.0, 1.0)
    with pytest.raises(ValueError):
        fill_sector(canvas, 5, 5, 3, 2.0, 1.0)
    assert _painted(canvas) == set()


def test_fill_sector_covers_only_its_quadrant():
    canvas = Canvas(60, 60)
    fill_sector(canvas, 30, 30, 20, 0.0, math.pi / 2)
    assert canvas.get_pixel(37, 37) == BLACK
    assert canvas.get_pixel(23, 23) == WHITE
    assert canvas.get_pixel(23, 37) == WHITE


def test_sector_outline_draws_radii_and_arc():
    canvas = Canvas(60, 60)
    sector(canvas, 30, 30, 20, 0.0, math.pi / 2)
    assert canvas.get_pixel(40, 30) == BLACK
    assert canvas.get_pixel(30, 40) == BLACK
    assert canvas.get_pixel(37, 37) == WHITE