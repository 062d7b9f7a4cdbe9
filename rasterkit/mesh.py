"""Indexed polygon meshes and mesh builders."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from .points import Point3D
from .polygon import Polygon3D


@dataclass(frozen=True)
class Face:
    """A polygon given by indices into the mesh's vertex list."""

    indices: tuple[int, ...]


@dataclass
class Mesh3D:
    """Shared vertices and the faces that reference them."""

    vertices: list[Point3D] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def add_vertex(self, v: Point3D) -> int:
        """Append a vertex and return its index."""
        self.vertices.append(v)
        return len(self.vertices) - 1

    def add_face(self, indices: Iterable[int]) -> None:
        """Add a face; faces with fewer than three indices are ignored."""
        idx = tuple(indices)
        if len(idx) >= 3:
            self.faces.append(Face(idx))

    def face_normal(self, face: Face) -> Point3D:
        """Unnormalised normal by Newell's method; its length is twice the area."""
        pts = [self.vertices[i] for i in face.indices]
        nx = ny = nz = 0.0
        for a, b in zip(pts, pts[1:] + pts[:1]):
            nx += (a.y - b.y) * (a.z + b.z)
            ny += (a.z - b.z) * (a.x + b.x)
            nz += (a.x - b.x) * (a.y + b.y)
        return Point3D(nx, ny, nz)

    def compute_vertex_normals(self) -> list[Point3D]:
        """Area-weighted unit normals, one per vertex."""
        accum = [Point3D(0.0, 0.0, 0.0)] * len(self.vertices)
        for face in self.faces:
            fn = self.face_normal(face)
            for vi in face.indices:
                accum[vi] = accum[vi] + fn
        return [n.normalized() for n in accum]

    def to_polygon(self, face: Face) -> Polygon3D:
        return Polygon3D(self.vertices[i] for i in face.indices)


def make_uv_sphere(rows: int, cols: int, radius: float = 1.0) -> Mesh3D:
    """Latitude/longitude sphere of quads; at least 2 rows and 3 columns."""
    rows = max(rows, 2)
    cols = max(cols, 3)
    mesh = Mesh3D()
    for i in range(rows + 1):
        theta = (i / rows) * math.pi
        sin_t, cos_t = math.sin(theta), math.cos(theta)
        for j in range(cols + 1):
            phi = (j / cols) * 2.0 * math.pi
            mesh.add_vertex(
                Point3D(radius * sin_t * math.cos(phi), radius * cos_t, radius * sin_t * math.sin(phi))
            )

    def idx(i: int, j: int) -> int:
        return i * (cols + 1) + j

    for i in range(rows):
        for j in range(cols):
            mesh.add_face((idx(i, j), idx(i, j + 1), idx(i + 1, j + 1), idx(i + 1, j)))
    return mesh