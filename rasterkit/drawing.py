"""Rasterisation of points, lines, curves and filled polygons."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from . import bezier, bresenham
from .points import Point2D, Point3D
from .raster import RasterBuffer
from .shading import clamp255, phong01

_T = TypeVar("_T")


def _lround(v: float) -> int:
    """Round half away from zero."""
    if v >= 0:
        return int(math.floor(v + 0.5))
    return -int(math.floor(-v + 0.5))


def _y_range(pts: Sequence[Point2D]) -> range:
    ys = [math.floor(p.y) for p in pts]
    return range(min(ys), max(ys) + 1)


def _edges(items: Sequence[_T]) -> list[tuple[_T, _T]]:
    """Each item paired with the one before it, wrapping around."""
    items = list(items)
    return list(zip(items, items[-1:] + items[:-1]))


def _crosses(ay: float, by: float, y: int) -> bool:
    return (ay < y <= by) or (by < y <= ay)


def _spans(nodes: list) -> list:
    """Consecutive pairs of scanline crossings, sorted by x."""
    nodes = sorted(nodes, key=lambda node: node[0])
    return list(zip(nodes[0::2], nodes[1::2]))


def _check_lengths(pts: Sequence, *others: Sequence) -> None:
    if any(len(other) != len(pts) for other in others):
        raise ValueError("per-vertex sequences must have the same length as the points")


class Drawing2D:
    """Drawing operations on a :class:`RasterBuffer`."""

    def __init__(self, rb: RasterBuffer) -> None:
        self.rb = rb

    def point(self, p: Point2D, c: int = 255) -> None:
        self.rb.set_pixel(_lround(p.x), _lround(p.y), c)

    def line(self, a: Point2D, b: Point2D, c: int = 255) -> None:
        bresenham.line(self.rb, _lround(a.x), _lround(a.y), _lround(b.x), _lround(b.y), c)

    def polyline(self, pts: Sequence[Point2D], c: int = 255) -> None:
        """Connect consecutive points; the shape is left open."""
        for a, b in zip(pts, pts[1:]):
            self.line(a, b, c)

    def polygon(self, pts: Sequence[Point2D], c: int = 255) -> None:
        """Outline of a closed polygon."""
        if len(pts) < 2:
            return
        pts = list(pts)
        for a, b in zip(pts, pts[1:] + pts[:1]):
            self.line(a, b, c)

    def fill_polygon(self, pts: Sequence[Point2D], c: int = 255) -> None:
        """Scanline fill with the even-odd rule, right edge excluded."""
        if len(pts) < 3:
            return
        edges = _edges(pts)
        for y in _y_range(pts):
            nodes = sorted(
                int(a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y))
                for a, b in edges
                if _crosses(a.y, b.y, y)
            )
            for x0, x1 in zip(nodes[0::2], nodes[1::2]):
                for x in range(x0, x1):
                    self.rb.set_pixel(x, y, c)

    def fill_polygon_z(
        self, pts: Sequence[Point2D], depths: Sequence[float], c: int = 255
    ) -> None:
        """Scanline fill with interpolated depth tested against the Z-buffer."""
        if len(pts) < 3:
            return
        _check_lengths(pts, depths)
        edges = _edges(list(zip(pts, depths)))
        for y in _y_range(pts):
            nodes = []
            for (a, za), (b, zb) in edges:
                if _crosses(a.y, b.y, y):
                    t = (y - a.y) / (b.y - a.y)
                    nodes.append((int(a.x + t * (b.x - a.x)), za + t * (zb - za)))
            for (x0, z0), (x1, z1) in _spans(nodes):
                for x in range(x0, x1 + 1):
                    t = 0.0 if x1 == x0 else (x - x0) / (x1 - x0)
                    if self.rb.test_and_set_depth(x, y, z0 + t * (z1 - z0)):
                        self.rb.set_pixel(x, y, c)

    def fill_polygon_shaded(
        self,
        pts: Sequence[Point2D],
        depths: Sequence[float],
        intensities: Sequence[float],
    ) -> None:
        """Z-buffered fill with intensities interpolated between vertices."""
        if len(pts) < 3:
            return
        _check_lengths(pts, depths, intensities)
        edges = _edges(list(zip(pts, depths, intensities)))
        for y in _y_range(pts):
            nodes = []
            for (a, za, ia), (b, zb, ib) in edges:
                if _crosses(a.y, b.y, y):
                    t = (y - a.y) / (b.y - a.y)
                    nodes.append(
                        (int(a.x + t * (b.x - a.x)), za + t * (zb - za), ia + t * (ib - ia))
                    )
            for (x0, z0, i0), (x1, z1, i1) in _spans(nodes):
                for x in range(x0, x1 + 1):
                    t = 0.0 if x1 == x0 else (x - x0) / (x1 - x0)
                    if self.rb.test_and_set_depth(x, y, z0 + t * (z1 - z0)):
                        self.rb.set_pixel(x, y, clamp255(i0 + t * (i1 - i0)))

    def fill_polygon_phong(
        self,
        pts: Sequence[Point2D],
        view_pos: Sequence[Point3D],
        view_norm: Sequence[Point3D],
        base: int = 200,
        kd: float = 0.7,
        ks: float = 0.3,
        shininess: float = 16.0,
        light_dir: Point3D = Point3D(0.0, 0.0, -1.0),
    ) -> None:
        """Per-pixel Phong shading with view-space positions and normals."""
        if len(pts) < 3:
            return
        _check_lengths(pts, view_pos, view_norm)
        edges = _edges(list(zip(pts, view_pos, view_norm)))
        for y in _y_range(pts):
            nodes = []
            for (a, pa, na), (b, pb, nb) in edges:
                if not _crosses(a.y, b.y, y):
                    continue
                t = 0.0 if b.y == a.y else (y - a.y) / (b.y - a.y)
                x = math.floor(a.x + t * (b.x - a.x))
                z = pa.z + t * (pb.z - pa.z)
                nodes.append((x, z, na + (nb - na) * t, pa + (pb - pa) * t))
            for (x0, z0, n0, p0), (x1, z1, n1, p1) in _spans(nodes):
                for x in range(x0, x1 + 1):
                    t = 0.0 if x1 == x0 else (x - x0) / (x1 - x0)
                    if not self.rb.test_and_set_depth(x, y, z0 + t * (z1 - z0)):
                        continue
                    normal = n0 + (n1 - n0) * t
                    pos = p0 + (p1 - p0) * t
                    view_dir = Point3D(-pos.x, -pos.y, -pos.z)
                    i01 = phong01(normal, light_dir, view_dir, kd, ks, shininess)
                    self.rb.set_pixel(x, y, _lround((base / 255.0) * 255.0 * i01))

    def circle(self, center: Point2D, radius: int, c: int = 255) -> None:
        bresenham.circle(self.rb, _lround(center.x), _lround(center.y), radius, c)

    def quadratic_bezier(
        self, p0: Point2D, p1: Point2D, p2: Point2D, segments: int, c: int = 255
    ) -> None:
        self.polyline(bezier.tesselate_quadratic(p0, p1, p2, segments), c)

    def cubic_bezier(
        self, p0: Point2D, p1: Point2D, p2: Point2D, p3: Point2D, segments: int, c: int = 255
    ) -> None:
        self.polyline(bezier.tesselate_cubic(p0, p1, p2, p3, segments), c)