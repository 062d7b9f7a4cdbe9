"""Example scenes: a geometry report, a shaded sphere and a shaded cube."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Sequence
from pathlib import Path

from .lines import Line2D, Line3D
from .mesh import Mesh3D, make_uv_sphere
from .mesh_renderer import MeshRenderer2D
from .points import Point2D, Point3D
from .polygon import Polygon3D
from .raster import RasterBuffer
from .transforms import Transformation2D, Transformation3D
from .view import View3DParameters


def _fmt(value: float) -> str:
    return format(value, "g")


def geometry_report() -> list[str]:
    """Lines describing a few basic geometric computations."""
    tri = Polygon3D([Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0)])
    a, b = Point2D(1, 2), Point2D(3, 4)
    p, q = Point3D(1, 0, 0), Point3D(0, 1, 0)
    l2 = Line2D(Point2D(0, 0), Point2D(3, 4))
    l3 = Line3D(Point3D(0, 0, 0), Point3D(0, 3, 4))

    p1 = Point2D(1, 0)
    p_rot = Transformation2D.rotation(math.pi / 2).apply(p1)
    p_trans = Transformation2D.translation(2, 3).apply(p_rot)

    return [
        f"2D add: {a + b}",
        f"2D dist: {_fmt(a.distance_to(b))}",
        f"3D cross: {p.cross(q)}",
        f"3D dot: {_fmt(p.dot(q))}",
        f"Line2D: {l2} length={_fmt(l2.length())}",
        f"Line3D: {l3} length={_fmt(l3.length())}",
        str(tri),
        f"Centroid: {tri.centroid()}",
        f"Normal: {tri.normal()}",
        f"Area: {_fmt(tri.area())}",
        f"Original: {p1}",
        f"Rotated: {p_rot}",
        f"Translated: {p_trans}",
    ]


def render_sphere_demo(directory: str | os.PathLike[str] = ".") -> list[Path]:
    """Render a rotated UV sphere with Gouraud and Phong shading; return the files written."""
    out = Path(directory)
    params = View3DParameters(
        Point3D(0, 0, 5), Point3D(0, 0, 0), Point3D(0, 1, 0), 60.0 * math.pi / 180.0, 1.0, 0.1, 100.0
    )
    cam = params.make_view()
    proj = params.make_projection()

    sphere = make_uv_sphere(32, 48, 1.2)
    model = Transformation3D.rotation_y(0.6) @ Transformation3D.rotation_x(-0.3)
    view = cam.view_matrix()
    sphere.vertices = [view.apply(model.apply(p)) for p in sphere.vertices]
    vnorm = sphere.compute_vertex_normals()

    rb = RasterBuffer(600, 600, 1, 0, True)
    renderer = MeshRenderer2D(rb, cam, proj, Point3D(0.3, 0.4, -1.0))

    gouraud_path = out / "sphere_gouraud.ppm"
    rb.clear_depth()
    rb.clear(0)
    renderer.render_gouraud(sphere, vnorm, False)
    rb.save_ppm(gouraud_path)

    phong_path = out / "sphere_phong.ppm"
    rb.clear_depth()
    rb.clear(0)
    renderer.render_phong(sphere, vnorm, False, 230, 0.7, 0.4, 32.0)
    rb.save_ppm(phong_path)

    return [gouraud_path, phong_path]


def _cube_mesh(s: float = 1.0) -> Mesh3D:
    mesh = Mesh3D()
    v = [
        mesh.add_vertex(Point3D(x, y, z))
        for x, y, z in (
            (-s, -s, -s), (s, -s, -s), (s, s, -s), (-s, s, -s),
            (-s, -s, s), (s, -s, s), (s, s, s), (-s, s, s),
        )
    ]
    for face in (
        (v[0], v[1], v[2], v[3]),  # back
        (v[4], v[5], v[6], v[7]),  # front
        (v[0], v[1], v[5], v[4]),  # bottom
        (v[2], v[3], v[7], v[6]),  # top
        (v[1], v[2], v[6], v[5]),  # right
        (v[0], v[3], v[7], v[4]),  # left
    ):
        mesh.add_face(face)
    return mesh


def render_cube_demo(directory: str | os.PathLike[str] = ".") -> Path:
    """Render a shared-vertex cube with Gouraud shading and wireframe; return the file."""
    params = View3DParameters(
        Point3D(2, 2, 5), Point3D(0, 0, 0), Point3D(0, 1, 0), 60.0 * math.pi / 180.0, 1.0, 0.1, 100.0
    )
    cam = params.make_view()
    proj = params.make_projection()

    mesh = _cube_mesh()
    view = cam.view_matrix()
    mesh.vertices = [view.apply(p) for p in mesh.vertices]
    vnorm = mesh.compute_vertex_normals()

    rb = RasterBuffer(512, 512, 1, 0, True)
    rb.clear_depth()
    MeshRenderer2D(rb, cam, proj, Point3D(0, 0, -1)).render_gouraud(mesh, vnorm, True)

    path = Path(directory) / "mesh_cube_gouraud.ppm"
    rb.save_ppm(path)
    return path


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rasterkit", description="Run the example scenes.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("geometry", "sphere", "cube", "all"),
        default="all",
        help="which example to run",
    )
    parser.add_argument(
        "-o", "--output-dir", default=".", help="directory for the rendered images"
    )
    args = parser.parse_args(argv)

    if args.demo in ("geometry", "all"):
        print("\n".join(geometry_report()))
    if args.demo in ("sphere", "all"):
        paths = render_sphere_demo(args.output_dir)
        print("Saved " + " and ".join(p.name for p in paths))
    if args.demo in ("cube", "all"):
        path = render_cube_demo(args.output_dir)
        print(f"Saved {path.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())