"""A collection of polygons sharing one projection."""

from __future__ import annotations

from .points import Point2D
from .polygon import Polygon3D
from .projection import Projection3D
from .transforms import Transformation3D


class Scene3D:
    """Polygons to be transformed and projected together."""

    def __init__(self, projection: Projection3D | None = None) -> None:
        self.objects: list[Polygon3D] = []
        self.projection = projection if projection is not None else Projection3D()

    def add_object(self, polygon: Polygon3D) -> None:
        """Add a copy of ``polygon`` to the scene."""
        self.objects.append(Polygon3D(polygon.vertices))

    def apply_transformation(self, transform: Transformation3D) -> None:
        """Transform every vertex of every polygon in place."""
        for poly in self.objects:
            poly.vertices = [transform.apply(v) for v in poly.vertices]

    def project_to_2d(self) -> list[list[Point2D]]:
        """Project front-facing polygons; those with normal z >= 0 are culled."""
        projected = []
        for poly in self.objects:
            if len(poly) < 3:
                continue
            if poly.normal().z >= 0:
                continue
            projected.append([self.projection.project(v) for v in poly.vertices])
        return projected

    def __str__(self) -> str:
        return f"Scene3D with {len(self.objects)} objects"