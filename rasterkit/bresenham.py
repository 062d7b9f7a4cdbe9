"""Integer line and circle rasterisation."""

from __future__ import annotations

from collections.abc import Iterator

from .raster import RasterBuffer


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Pixels of the line from ``(x0, y0)`` to ``(x1, y1)``, both ends included."""
    dx, sx = abs(x1 - x0), (1 if x0 < x1 else -1)
    dy, sy = -abs(y1 - y0), (1 if y0 < y1 else -1)
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def circle_points(cx: int, cy: int, radius: int) -> Iterator[tuple[int, int]]:
    """Pixels of a midpoint circle, eight symmetric points per step."""
    x, y = radius, 0
    err = 1 - x
    while x >= y:
        for px, py in ((x, y), (y, x)):
            yield cx + px, cy + py
            yield cx - px, cy + py
            yield cx + px, cy - py
            yield cx - px, cy - py
        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x + 1)


def line(rb: RasterBuffer, x0: int, y0: int, x1: int, y1: int, color: int = 255) -> None:
    for x, y in line_points(x0, y0, x1, y1):
        rb.set_pixel(x, y, color)


def circle(rb: RasterBuffer, cx: int, cy: int, radius: int, color: int = 255) -> None:
    for x, y in circle_points(cx, cy, radius):
        rb.set_pixel(x, y, color)