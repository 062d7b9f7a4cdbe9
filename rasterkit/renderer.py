"""Z-buffered polygon renderer for a :class:`Scene3D`."""

from __future__ import annotations

from .drawing import Drawing2D
from .points import Point3D
from .projection import Projection3D, to_viewport
from .raster import RasterBuffer
from .scene import Scene3D
from .shading import gouraud, lambert, phong
from .view import View3D

MODES = ("lambert", "phong", "gouraud")


class Renderer2D:
    """Shades and outlines view-space polygons into a raster buffer."""

    def __init__(
        self,
        rb: RasterBuffer,
        camera: View3D,
        projection: Projection3D,
        light_dir: Point3D = Point3D(0.0, 0.0, -1.0),
    ) -> None:
        self.rb = rb
        self.camera = camera
        self.projection = projection
        self.light_dir = light_dir

    def render(self, scene: Scene3D, mode: str = "lambert") -> None:
        """Draw every front-facing polygon with the given shading mode."""
        if mode not in MODES:
            raise ValueError(f"unknown shading mode {mode!r}; expected one of {MODES}")
        draw = Drawing2D(self.rb)
        for poly in scene.objects:
            if len(poly) < 3:
                continue
            n = poly.normal()
            if n.z >= 0:
                continue

            pts2d = [
                to_viewport(self.projection.project(v), self.rb.width, self.rb.height)
                for v in poly.vertices
            ]
            depths = [v.z for v in poly.vertices]

            if mode == "lambert":
                intensities = [lambert(n, self.light_dir)] * len(pts2d)
            elif mode == "phong":
                view_dir = (self.camera.eye - poly.centroid()).normalized()
                intensities = [phong(n, self.light_dir, view_dir)] * len(pts2d)
            else:
                normals = [n] * len(poly.vertices)
                intensities = gouraud(poly.vertices, normals, self.light_dir)

            draw.fill_polygon_shaded(pts2d, depths, intensities)
            draw.polygon(pts2d, 255)