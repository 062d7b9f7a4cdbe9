"""Triangle rasteriser for indexed meshes with flat, Gouraud and Phong shading."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator, Sequence

from .drawing import Drawing2D
from .mesh import Face, Mesh3D
from .points import Point2D, Point3D
from .projection import Projection3D, to_viewport
from .raster import RasterBuffer
from .shading import lambert01, phong01, to_u8
from .view import View3D


class RenderMode(enum.Enum):
    """How triangles are shaded."""

    FLAT = "flat"
    GOURAUD = "gouraud"
    PHONG = "phong"


def _edge(a: Point2D, b: Point2D, c: Point2D) -> float:
    """Twice the signed area of the triangle ``a, b, c``."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def _fan(face: Face) -> Iterator[tuple[int, int, int]]:
    """Fan triangulation of a face around its first vertex."""
    idx = face.indices
    first = idx[0]
    for b, c in zip(idx[1:-1], idx[2:]):
        yield first, b, c


def _covered(
    s: Sequence[Point2D], width: int, height: int
) -> Iterator[tuple[int, int, float, float, float]]:
    """Pixels whose centres lie inside the triangle, with barycentric weights."""
    area = _edge(s[0], s[1], s[2])
    if area == 0.0:
        return
    xs = [p.x for p in s]
    ys = [p.y for p in s]
    min_x = max(0, math.floor(min(xs)))
    min_y = max(0, math.floor(min(ys)))
    max_x = min(width - 1, math.ceil(max(xs)))
    max_y = min(height - 1, math.ceil(max(ys)))
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            centre = Point2D(x + 0.5, y + 0.5)
            w0 = _edge(s[1], s[2], centre) / area
            w1 = _edge(s[2], s[0], centre) / area
            w2 = 1.0 - w0 - w1
            if w0 >= 0.0 and w1 >= 0.0 and w2 >= 0.0:
                yield x, y, w0, w1, w2


def _blend(values: Sequence[Point3D], weights: Sequence[float]) -> Point3D:
    a, b, c = values
    w0, w1, w2 = weights
    return Point3D(
        w0 * a.x + w1 * b.x + w2 * c.x,
        w0 * a.y + w1 * b.y + w2 * c.y,
        w0 * a.z + w1 * b.z + w2 * c.z,
    )


class MeshRenderer2D:
    """Renders view-space meshes into a Z-buffered raster."""

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

    def render(
        self,
        mesh: Mesh3D,
        vertex_normals: Sequence[Point3D],
        mode: RenderMode | str = RenderMode.GOURAUD,
        draw_wire: bool = False,
        perspective_correct: bool = True,
        base: int = 230,
        kd: float = 0.7,
        ks: float = 0.3,
        shininess: float = 24.0,
    ) -> None:
        """Draw a mesh whose vertices and normals are already in view space."""
        mode = RenderMode(mode)
        if len(vertex_normals) != len(mesh.vertices):
            raise ValueError("one vertex normal is needed per mesh vertex")
        draw = Drawing2D(self.rb)
        width, height = self.rb.width, self.rb.height

        for face in mesh.faces:
            if len(face.indices) < 3:
                continue
            face_n = mesh.to_polygon(face).normal()
            if face_n.z >= 0:
                continue

            for tri in _fan(face):
                positions = [mesh.vertices[i] for i in tri]
                normals = [vertex_normals[i] for i in tri]
                screen = [
                    to_viewport(self.projection.project(p), width, height) for p in positions
                ]
                z_view = [p.z for p in positions]
                inv_w = [
                    1.0 / max(1e-6, abs(p.z)) if perspective_correct else 1.0
                    for p in positions
                ]

                if _edge(screen[0], screen[1], screen[2]) >= 0:
                    continue

                if mode is RenderMode.FLAT:
                    self._triangle_flat(screen, face_n, z_view, base)
                elif mode is RenderMode.GOURAUD:
                    self._triangle_gouraud(screen, normals, z_view, base)
                else:
                    self._triangle_phong(
                        screen, positions, normals, z_view, inv_w, base, kd, ks, shininess
                    )

                if draw_wire:
                    draw.line(screen[0], screen[1], 255)
                    draw.line(screen[1], screen[2], 255)
                    draw.line(screen[2], screen[0], 255)

    def render_gouraud(
        self, mesh: Mesh3D, vertex_normals: Sequence[Point3D], draw_wire: bool = False
    ) -> None:
        """Smooth per-vertex diffuse shading."""
        self.render(mesh, vertex_normals, RenderMode.GOURAUD, draw_wire)

    def render_phong(
        self,
        mesh: Mesh3D,
        vertex_normals: Sequence[Point3D],
        draw_wire: bool = False,
        base: int = 230,
        kd: float = 0.7,
        ks: float = 0.3,
        shininess: float = 24.0,
    ) -> None:
        """Per-pixel Phong shading with interpolated normals."""
        self.render(
            mesh,
            vertex_normals,
            RenderMode.PHONG,
            draw_wire,
            True,
            base,
            kd,
            ks,
            shininess,
        )

    def _triangle_flat(
        self,
        screen: Sequence[Point2D],
        face_n: Point3D,
        z_view: Sequence[float],
        base: int,
    ) -> None:
        rb = self.rb
        intensity = lambert01(face_n, self.light_dir)
        value = round((base / 255.0) * 255.0 * intensity)
        for x, y, w0, w1, w2 in _covered(screen, rb.width, rb.height):
            z = w0 * z_view[0] + w1 * z_view[1] + w2 * z_view[2]
            if rb.test_and_set_depth(x, y, z):
                rb.set_pixel(x, y, value)

    def _triangle_gouraud(
        self,
        screen: Sequence[Point2D],
        normals: Sequence[Point3D],
        z_view: Sequence[float],
        base: int,
    ) -> None:
        rb = self.rb
        i0, i1, i2 = (lambert01(n, self.light_dir) for n in normals)
        for x, y, w0, w1, w2 in _covered(screen, rb.width, rb.height):
            z = w0 * z_view[0] + w1 * z_view[1] + w2 * z_view[2]
            if not rb.test_and_set_depth(x, y, z):
                continue
            intensity = w0 * i0 + w1 * i1 + w2 * i2
            rb.set_pixel(x, y, to_u8((base / 255.0) * intensity))

    def _triangle_phong(
        self,
        screen: Sequence[Point2D],
        positions: Sequence[Point3D],
        normals: Sequence[Point3D],
        z_view: Sequence[float],
        inv_w: Sequence[float],
        base: int,
        kd: float,
        ks: float,
        shininess: float,
    ) -> None:
        rb = self.rb
        for x, y, w0, w1, w2 in _covered(screen, rb.width, rb.height):
            iw = w0 * inv_w[0] + w1 * inv_w[1] + w2 * inv_w[2]
            if iw <= 1e-12:
                continue
            weights = (w0 * inv_w[0] / iw, w1 * inv_w[1] / iw, w2 * inv_w[2] / iw)
            pos = _blend(positions, weights)
            normal = _blend(normals, weights)
            z = weights[0] * z_view[0] + weights[1] * z_view[1] + weights[2] * z_view[2]
            if not rb.test_and_set_depth(x, y, z):
                continue
            view_dir = Point3D(-pos.x, -pos.y, -pos.z)
            intensity = phong01(normal, self.light_dir, view_dir, kd, ks, shininess)
            rb.set_pixel(x, y, to_u8((base / 255.0) * intensity))