"""Polygons in three-dimensional space."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .lines import Line3D
from .points import Point3D


class Polygon3D:
    """An ordered ring of vertices, assumed planar."""

    def __init__(self, vertices: Iterable[Point3D] = ()) -> None:
        self.vertices: list[Point3D] = list(vertices)

    def add_vertex(self, vertex: Point3D) -> None:
        self.vertices.append(vertex)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point3D]:
        return iter(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon3D):
            return NotImplemented
        return self.vertices == other.vertices

    def __repr__(self) -> str:
        return f"Polygon3D({self.vertices!r})"

    def edge(self, i: int) -> Line3D:
        """Edge from vertex ``i`` to the next, wrapping around."""
        if not self.vertices:
            return Line3D()
        n = len(self.vertices)
        return Line3D(self.vertices[i % n], self.vertices[(i + 1) % n])

    def centroid(self) -> Point3D:
        """Average of the vertices."""
        if not self.vertices:
            return Point3D()
        n = float(len(self.vertices))
        return Point3D(
            sum(v.x for v in self.vertices) / n,
            sum(v.y for v in self.vertices) / n,
            sum(v.z for v in self.vertices) / n,
        )

    def normal(self) -> Point3D:
        """Unit normal from the first three vertices."""
        if len(self.vertices) < 3:
            return Point3D(0.0, 0.0, 0.0)
        v0, v1, v2 = self.vertices[:3]
        return (v1 - v0).cross(v2 - v0).normalized()

    def area(self) -> float:
        """Area by fan triangulation, measured along the polygon normal."""
        if len(self.vertices) < 3:
            return 0.0
        n = self.normal()
        v0 = self.vertices[0]
        total = 0.0
        for v1, v2 in zip(self.vertices[1:], self.vertices[2:]):
            cross = (v1 - v0).cross(v2 - v0)
            total += 0.5 * n.dot(cross.normalized()) * cross.length()
        return total

    def __str__(self) -> str:
        return "Polygon3D[" + ", ".join(str(v) for v in self.vertices) + "]"