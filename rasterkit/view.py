"""Camera placement and the parameters that build a camera and projection."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .points import Point3D
from .projection import Projection3D, ProjectionType
from .transforms import Transformation3D


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass
class View3D:
    """A look-at camera."""

    eye: Point3D = Point3D(0.0, 0.0, 5.0)
    target: Point3D = Point3D(0.0, 0.0, 0.0)
    up: Point3D = Point3D(0.0, 1.0, 0.0)

    def view_matrix(self) -> Transformation3D:
        """World-to-camera transform; the camera looks down -Z."""
        f = (self.target - self.eye).normalized()
        r = f.cross(self.up).normalized()
        u = r.cross(f)
        eye = self.eye
        return Transformation3D(
            (
                (r.x, r.y, r.z, -r.dot(eye)),
                (u.x, u.y, u.z, -u.dot(eye)),
                (-f.x, -f.y, -f.z, f.dot(eye)),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def __str__(self) -> str:
        return f"View3D(eye={self.eye}, target={self.target}, up={self.up})"


@dataclass
class View3DParameters:
    """Camera and perspective settings bundled together."""

    eye: Point3D = Point3D(0.0, 0.0, 5.0)
    target: Point3D = Point3D(0.0, 0.0, 0.0)
    up: Point3D = Point3D(0.0, 1.0, 0.0)
    fov: float = 90.0 * math.pi / 180.0
    aspect: float = 1.0
    near_z: float = 0.1
    far_z: float = 1000.0

    def make_view(self) -> View3D:
        return View3D(self.eye, self.target, self.up)

    def make_projection(self) -> Projection3D:
        return Projection3D(ProjectionType.PERSPECTIVE, self.fov, self.near_z, self.far_z)

    def __str__(self) -> str:
        return (
            f"View3DParameters(eye={self.eye}, target={self.target}, up={self.up}, "
            f"fov={_fmt(self.fov)}, aspect={_fmt(self.aspect)}, "
            f"near={_fmt(self.near_z)}, far={_fmt(self.far_z)})"
        )