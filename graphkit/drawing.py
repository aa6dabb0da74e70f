"""Shapes built on top of a Canvas: circles, triangles and circular sectors."""

from __future__ import annotations

import math
from collections.abc import Iterator

from graphkit.canvas import Canvas

MAX_SECTOR_STEPS = 500
DEFAULT_POINTS_IN_FULL_CIRCLE = 500


def _octant_steps(r: int) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) offsets of one octant of a midpoint circle of radius r."""
    x, y, e = r, 0, 0
    while x >= y:
        yield x, y
        e1 = e + y + y + 1
        e2 = e1 - x - x + 1
        y += 1
        if abs(e2) < abs(e1):
            x -= 1
            e = e2
        else:
            e = e1


def circle(canvas: Canvas, a: float, b: float, r: float) -> None:
    """Draw the outline of a circle centred at (a, b); off-canvas points are skipped."""
    ia, ib, ir = int(a), int(b), int(r)
    for x, y in _octant_steps(ir):
        for px, py in (
            (ia + x, ib + y),
            (ia - x, ib + y),
            (ia + x, ib - y),
            (ia - x, ib - y),
            (ia + y, ib + x),
            (ia - y, ib + x),
            (ia + y, ib - x),
            (ia - y, ib - x),
        ):
            canvas.point(px, py)


def fill_circle(canvas: Canvas, a: float, b: float, r: float) -> None:
    """Fill a disc centred at (a, b) with horizontal runs clipped to the canvas."""
    ia, ib, ir = int(a), int(b), int(r)
    for x, y in _octant_steps(ir):
        canvas.horizontal_line(ia - x, ia + x, ib + y)
        canvas.horizontal_line(ia - x, ia + x, ib - y)
        canvas.horizontal_line(ia - y, ia + y, ib + x)
        canvas.horizontal_line(ia - y, ia + y, ib - x)


def triangle(
    canvas: Canvas,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
) -> None:
    """Draw the outline of a triangle; coordinates are truncated to integers."""
    canvas.polygon([int(x1), int(x2), int(x3)], [int(y1), int(y2), int(y3)])


def fill_triangle(
    canvas: Canvas,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
) -> None:
    """Fill a triangle; coordinates are truncated to integers."""
    canvas.fill_polygon([int(x1), int(x2), int(x3)], [int(y1), int(y2), int(y3)])


def sector_points(
    xcenter: float,
    ycenter: float,
    radius: float,
    start_radians: float,
    end_radians: float,
    num_pts_in_full_circle: int = DEFAULT_POINTS_IN_FULL_CIRCLE,
) -> tuple[list[float], list[float]]:
    """Return the vertices of a circular sector: the arc, then the centre.

    The arc is split into a number of steps proportional to its angle
    (between 1 and 500). Raises ValueError if the sweep is negative or
    exceeds a full turn.
    """
    delta = end_radians - start_radians
    if delta < 0 or delta > 2 * math.pi:
        raise ValueError("sector sweep must lie between 0 and 2*pi radians")
    steps = int(num_pts_in_full_circle * delta / (2 * math.pi))
    steps = min(max(steps, 1), MAX_SECTOR_STEPS)
    angles = [start_radians + j * delta / steps for j in range(steps + 1)]
    xs = [xcenter + radius * math.cos(theta) for theta in angles]
    ys = [ycenter + radius * math.sin(theta) for theta in angles]
    xs.append(xcenter)
    ys.append(ycenter)
    return xs, ys


def sector(
    canvas: Canvas,
    xcenter: float,
    ycenter: float,
    radius: float,
    start_radians: float,
    end_radians: float,
) -> None:
    """Draw the outline of a circular sector."""
    xs, ys = sector_points(xcenter, ycenter, radius, start_radians, end_radians)
    canvas.polygon(xs, ys)


def fill_sector(
    canvas: Canvas,
    xcenter: float,
    ycenter: float,
    radius: float,
    start_radians: float,
    end_radians: float,
) -> None:
    """Fill a circular sector."""
    xs, ys = sector_points(xcenter, ycenter, radius, start_radians, end_radians)
    canvas.fill_polygon(xs, ys)