"""Diffuse and specular lighting helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .points import Point3D


def clamp255(v: float) -> int:
    """Clamp to [0, 255] and truncate to an integer."""
    return int(max(0.0, min(255.0, v)))


def to_u8(v: float) -> int:
    """Map an intensity in [0, 1] to a rounded byte, clamping first."""
    return int(math.floor(max(0.0, min(1.0, v)) * 255.0 + 0.5))


def lambert01(normal: Point3D, light_dir: Point3D) -> float:
    """Lambertian diffuse term in [0, 1]."""
    return max(0.0, normal.normalized().dot(light_dir.normalized()))


def lambert(normal: Point3D, light_dir: Point3D, base: int = 200) -> int:
    return clamp255(base * lambert01(normal, light_dir))


def _diffuse_specular(
    normal: Point3D, light_dir: Point3D, view_dir: Point3D, shininess: float
) -> tuple[float, float]:
    n = normal.normalized()
    l = light_dir.normalized()
    v = view_dir.normalized()
    r = (n * (2.0 * n.dot(l)) - l).normalized()
    diff = max(0.0, n.dot(l))
    spec = max(0.0, r.dot(v)) ** shininess
    return diff, spec


def phong(
    normal: Point3D,
    light_dir: Point3D,
    view_dir: Point3D,
    shininess: float = 16,
    base: int = 200,
) -> int:
    """Weighted diffuse plus specular, scaled to ``base``."""
    diff, spec = _diffuse_specular(normal, light_dir, view_dir, shininess)
    return clamp255(base * (0.6 * diff + 0.4 * spec))


def phong01(
    normal: Point3D,
    light_dir: Point3D,
    view_dir: Point3D,
    kd: float = 0.7,
    ks: float = 0.3,
    shininess: float = 16.0,
) -> float:
    """Phong intensity ``kd*diffuse + ks*specular`` clamped to [0, 1]."""
    diff, spec = _diffuse_specular(normal, light_dir, view_dir, shininess)
    return max(0.0, min(1.0, kd * diff + ks * spec))


def gouraud(
    vertices: Sequence[Point3D],
    normals: Sequence[Point3D],
    light_dir: Point3D,
    base: int = 200,
) -> list[int]:
    """Per-vertex diffuse intensities for later interpolation."""
    if len(vertices) != len(normals):
        raise ValueError("vertices and normals must have the same length")
    return [lambert(n, light_dir, base) for n in normals]