"""Quadratic and cubic Bezier curves in the plane."""

from __future__ import annotations

from .points import Point2D


def quad(p0: Point2D, p1: Point2D, p2: Point2D, t: float) -> Point2D:
    """Quadratic Bezier at ``t`` in [0, 1]."""
    u = 1.0 - t
    return p0 * (u * u) + p1 * (2 * u * t) + p2 * (t * t)


def cubic(p0: Point2D, p1: Point2D, p2: Point2D, p3: Point2D, t: float) -> Point2D:
    """Cubic Bezier at ``t`` in [0, 1]."""
    u = 1.0 - t
    u2, t2 = u * u, t * t
    return p0 * (u2 * u) + p1 * (3 * u2 * t) + p2 * (3 * u * t2) + p3 * (t2 * t)


def _params(segments: int) -> list[float]:
    return [i / segments if segments else 0.0 for i in range(segments + 1)]


def tesselate_quadratic(p0: Point2D, p1: Point2D, p2: Point2D, segments: int) -> list[Point2D]:
    """``segments + 1`` points along the curve, endpoints included."""
    return [quad(p0, p1, p2, t) for t in _params(segments)]


def tesselate_cubic(
    p0: Point2D, p1: Point2D, p2: Point2D, p3: Point2D, segments: int
) -> list[Point2D]:
    """``segments + 1`` points along the curve, endpoints included."""
    return [cubic(p0, p1, p2, p3, t) for t in _params(segments)]