"""Projection of view-space points onto a normalised image plane."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .points import Point2D, Point3D


def _fmt(value: float) -> str:
    return format(value, "g")


class ProjectionType(enum.Enum):
    """Kind of projection applied by :class:`Projection3D`."""

    ORTHOGRAPHIC = "ORTHOGRAPHIC"
    PERSPECTIVE = "PERSPECTIVE"


@dataclass
class Projection3D:
    """Orthographic or pinhole perspective projection."""

    type: ProjectionType = ProjectionType.ORTHOGRAPHIC
    fov: float = 90.0 * math.pi / 180.0
    near_z: float = 0.1
    far_z: float = 1000.0

    def project(self, p: Point3D) -> Point2D:
        """Project ``p``; perspective points at or before the near plane map to the origin."""
        if self.type is ProjectionType.ORTHOGRAPHIC:
            return Point2D(p.x, p.y)
        aspect = 1.0
        f = 1.0 / math.tan(self.fov / 2.0)
        if p.z <= self.near_z:
            return Point2D(0.0, 0.0)
        return Point2D((p.x * f) / (aspect * p.z), (p.y * f) / p.z)

    def __str__(self) -> str:
        if self.type is ProjectionType.ORTHOGRAPHIC:
            return "Projection3D(ORTHOGRAPHIC)"
        return (
            f"Projection3D(PERSPECTIVE, fov={_fmt(self.fov)}, "
            f"near={_fmt(self.near_z)}, far={_fmt(self.far_z)})"
        )


def to_viewport(p: Point2D, width: float, height: float) -> Point2D:
    """Map normalised coordinates in [-1, 1] to pixel coordinates, flipping y."""
    x = (p.x + 1.0) * 0.5 * width
    y = (1.0 - (p.y + 1.0) * 0.5) * height
    return Point2D(x, y)