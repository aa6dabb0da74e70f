"""An off-screen raster canvas with a lower-left origin and a current pen colour."""

from __future__ import annotations

import math
import warnings
from collections.abc import Callable, Sequence

from graphkit.colors import clamp_rgb_int, rgb_int_to_pixel, rgb_to_rgb_int

MAX_POLYGON_POINTS = 1000

_Point = tuple[float, float]


def _clip_edge(
    start: _Point,
    end: _Point,
    axis: int,
    edge: float,
    inside: Callable[[float], bool],
) -> tuple[_Point, _Point] | None:
    """Clip a segment against one window edge; None if it lies wholly outside."""
    start_in = inside(start[axis])
    end_in = inside(end[axis])
    if start_in and end_in:
        return start, end
    if not start_in and not end_in:
        return None
    other = 1 - axis
    t = (edge - start[axis]) / (end[axis] - start[axis])
    crossing = [0.0, 0.0]
    crossing[axis] = edge
    crossing[other] = start[other] + t * (end[other] - start[other])
    point = (crossing[0], crossing[1])
    return (start, point) if start_in else (point, end)


class Canvas:
    """A width x height pixel buffer holding packed 0xRRGGBB values.

    Public coordinates have their origin at the lower-left corner with y
    growing upwards. A new canvas is white, with a black pen.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = int(width)
        self.height = int(height)
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self._rows = [[0] * self.width for _ in range(self.height)]
        self.color = 0
        self.rgb_int(255, 255, 255)
        self.clear()
        self.rgb_int(0, 0, 0)

    # -- colour -----------------------------------------------------------

    def rgb(self, r: float, g: float, b: float) -> None:
        """Set the pen colour from float channels in [0, 1] (clamped)."""
        self.rgb_int(*rgb_to_rgb_int(r, g, b))

    def rgb_int(self, r: int, g: int, b: int) -> None:
        """Set the pen colour from 8-bit channels (clamped to 0..255)."""
        self.color = rgb_int_to_pixel(*clamp_rgb_int(r, g, b))

    def clear(self) -> None:
        """Fill the whole canvas with the pen colour."""
        for row in self._rows:
            row[:] = [self.color] * self.width

    # -- screen-space primitives ------------------------------------------

    def _plot(self, sx: int, sy: int) -> None:
        if 0 <= sx < self.width and 0 <= sy < self.height:
            self._rows[sy][sx] = self.color

    def _segment(self, sx0: int, sy0: int, sx1: int, sy1: int) -> None:
        dx = abs(sx1 - sx0)
        dy = -abs(sy1 - sy0)
        step_x = 1 if sx0 < sx1 else -1
        step_y = 1 if sy0 < sy1 else -1
        err = dx + dy
        while True:
            self._plot(sx0, sy0)
            if sx0 == sx1 and sy0 == sy1:
                return
            doubled = 2 * err
            if doubled >= dy:
                err += dy
                sx0 += step_x
            if doubled <= dx:
                err += dx
                sy0 += step_y

    def _flip(self, y: float) -> int:
        return int(self.height - 1 - y)

    def _screen_points(
        self, xs: Sequence[float], ys: Sequence[float]
    ) -> list[tuple[int, int]]:
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have the same length")
        count = len(xs)
        if count > MAX_POLYGON_POINTS:
            warnings.warn(
                f"polygon has {count} points; points past the first "
                f"{MAX_POLYGON_POINTS} are ignored",
                stacklevel=3,
            )
            count = MAX_POLYGON_POINTS
        return [
            (int(x), self._flip(y)) for x, y in zip(xs[:count], ys[:count])
        ]

    # -- points and lines --------------------------------------------------

    def pixel(self, x: float, y: float) -> None:
        """Plot a point without reporting whether it landed on the canvas."""
        self._plot(int(x), self.height - 1 - int(y))

    def point(self, x: float, y: float) -> bool:
        """Plot a point; return False if it lies outside the canvas."""
        ix, iy = int(x), int(y)
        if ix < 0 or iy < 0 or ix >= self.width or iy >= self.height:
            return False
        self._rows[self.height - 1 - iy][ix] = self.color
        return True

    def unclipped_line(self, xs: float, ys: float, xe: float, ye: float) -> None:
        """Draw a line between two points, both ends included, without clipping."""
        self._segment(
            int(xs),
            self.height - 1 - int(ys),
            int(xe),
            self.height - 1 - int(ye),
        )

    def line(self, xs: float, ys: float, xe: float, ye: float) -> bool:
        """Draw a line clipped to the canvas; return False if nothing remains."""
        ixs, iys, ixe, iye = int(xs), int(ys), int(xe), int(ye)
        if (
            0 <= ixs < self.width
            and 0 <= ixe < self.width
            and 0 <= iys < self.height
            and 0 <= iye < self.height
        ):
            self.unclipped_line(ixs, iys, ixe, iye)
            return True

        top = float(self.height - 1)
        right = float(self.width - 1)
        edges = (
            (1, 0.0, lambda v: v >= 0.0),
            (1, top, lambda v: v <= top),
            (0, 0.0, lambda v: v >= 0.0),
            (0, right, lambda v: v <= right),
        )
        segment: tuple[_Point, _Point] | None = (
            (float(ixs), float(iys)),
            (float(ixe), float(iye)),
        )
        for axis, edge, inside in edges:
            segment = _clip_edge(segment[0], segment[1], axis, edge, inside)
            if segment is None:
                return False
        (cxs, cys), (cxe, cye) = segment
        self._segment(int(cxs), self._flip(cys), int(cxe), self._flip(cye))
        return True

    def horizontal_line(self, x0: float, x1: float, y: float) -> bool:
        """Draw a one-pixel horizontal run clipped to the canvas.

        Returns False when the run lies wholly outside the canvas.
        """
        ix0, ix1, iy = int(x0), int(x1), int(y)
        if iy < 0 or iy >= self.height:
            return False
        if ix0 > ix1:
            ix0, ix1 = ix1, ix0
        if ix1 < 0 or ix0 >= self.width:
            return False
        ix0 = max(ix0, 0)
        ix1 = min(ix1, self.width - 1)
        for x in range(ix0, ix1 + 1):
            self.point(x, iy)
        return True

    # -- rectangles and polygons -------------------------------------------

    def rectangle(self, xlow: float, ylow: float, width: float, height: float) -> None:
        """Draw the outline of a rectangle."""
        left, w, h = int(xlow), int(width), int(height)
        top = self.height - int(ylow) - h
        if w < 0 or h < 0:
            return
        right, bottom = left + w, top + h
        self._segment(left, top, right, top)
        self._segment(right, top, right, bottom)
        self._segment(right, bottom, left, bottom)
        self._segment(left, bottom, left, top)

    def fill_rectangle(
        self, xlow: float, ylow: float, width: float, height: float
    ) -> None:
        """Fill a width x height block whose lower-left pixel is (xlow, ylow)."""
        left, w, h = int(xlow), int(width), int(height)
        top = self.height - int(ylow) - h
        for sy in range(max(top, 0), min(top + h, self.height)):
            row = self._rows[sy]
            for sx in range(max(left, 0), min(left + w, self.width)):
                row[sx] = self.color

    def polygon(self, xs: Sequence[float], ys: Sequence[float]) -> bool:
        """Draw a closed polygon outline; return False if there are no points."""
        points = self._screen_points(xs, ys)
        if not points:
            return False
        for (ax, ay), (bx, by) in zip(points, points[1:]):
            self._segment(ax, ay, bx, by)
        self._segment(*points[0], *points[-1])
        return True

    def fill_polygon(self, xs: Sequence[float], ys: Sequence[float]) -> bool:
        """Fill a polygon with the even-odd rule; return False if there are no points."""
        points = self._screen_points(xs, ys)
        if not points:
            return False
        edges = list(zip(points, points[1:] + points[:1]))
        row_low = max(min(p[1] for p in points), 0)
        row_high = min(max(p[1] for p in points), self.height - 1)
        for sy in range(row_low, row_high + 1):
            centre = sy + 0.5
            crossings = []
            for (ax, ay), (bx, by) in edges:
                if ay == by:
                    continue
                if ay > by:
                    ax, ay, bx, by = bx, by, ax, ay
                if ay <= centre < by:
                    crossings.append(ax + (centre - ay) * (bx - ax) / (by - ay))
            crossings.sort()
            row = self._rows[sy]
            for start, stop in zip(crossings[::2], crossings[1::2]):
                first = max(math.ceil(start - 0.5), 0)
                last = min(math.ceil(stop - 0.5), self.width)
                for sx in range(first, last):
                    row[sx] = self.color
        return True

    # -- reading back ------------------------------------------------------

    def get_pixel(self, x: float, y: float) -> int:
        """Return the pixel value at (x, y); raise IndexError outside the canvas."""
        ix, iy = int(x), int(y)
        if ix < 0 or iy < 0 or ix >= self.width or iy >= self.height:
            raise IndexError(f"pixel ({ix}, {iy}) is outside the canvas")
        return self._rows[self.height - 1 - iy][ix]

    def get_pixel_safe(self, x: float, y: float) -> int | None:
        """Return the pixel value at (x, y), or None outside the canvas."""
        try:
            return self.get_pixel(x, y)
        except IndexError:
            return None