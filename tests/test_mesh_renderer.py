import math

import pytest

from rasterkit.mesh import Mesh3D
from rasterkit.mesh_renderer import MeshRenderer2D, RenderMode
from rasterkit.points import Point2D, Point3D
from rasterkit.projection import Projection3D, ProjectionType
from rasterkit.raster import RasterBuffer
from rasterkit.view import View3D, View3DParameters


class _MirrorProjection:
    """Orthographic projection mirrored in x, so front faces wind the way the rasteriser draws."""

    def project(self, p):
        return Point2D(-p.x, p.y)


def _front_triangle():
    mesh = Mesh3D()
    a = mesh.add_vertex(Point3D(0.0, 0.0, -2.0))
    b = mesh.add_vertex(Point3D(0.0, 1.0, -2.0))
    c = mesh.add_vertex(Point3D(1.0, 0.0, -2.0))
    mesh.add_face([a, b, c])
    return mesh


def _facing_normals(mesh):
    return [Point3D(0.0, 0.0, -1.0)] * len(mesh.vertices)


def _renderer(rb, projection=None):
    return MeshRenderer2D(rb, View3D(), projection or _MirrorProjection())


def _assert_untouched(rb):
    for x, y in [(8, 8), (10, 5), (5, 10), (10, 10), (2, 2), (15, 15)]:
        assert rb.get_pixel(x, y)[0] == 0
        assert rb.depth[y * rb.width + x] == pytest.approx(1e9)
    assert sum(rb.data) == 0


def test_gouraud_fills_inside_and_leaves_outside():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    _renderer(rb).render_gouraud(mesh, _facing_normals(mesh))
    assert rb.get_pixel(8, 8)[0] == 230
    assert rb.get_pixel(15, 15)[0] == 0
    assert rb.get_pixel(2, 2)[0] == 0


def test_flat_mode_uses_face_normal():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    _renderer(rb).render(mesh, _facing_normals(mesh), RenderMode.FLAT)
    assert rb.get_pixel(8, 8)[0] == 230


def test_mode_accepts_string_value():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    _renderer(rb).render(mesh, _facing_normals(mesh), "flat", base=100)
    assert rb.get_pixel(8, 8)[0] == 100


def test_phong_diffuse_only_when_specular_faces_away():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    _renderer(rb).render_phong(mesh, _facing_normals(mesh), False, 230, 0.7, 0.4, 32.0)
    assert rb.get_pixel(8, 8)[0] == 161


def test_phong_perspective_correction_irrelevant_at_constant_depth():
    mesh = _front_triangle()
    corrected = RasterBuffer(20, 20, 1, 0, True)
    plain = RasterBuffer(20, 20, 1, 0, True)
    _renderer(corrected).render(mesh, _facing_normals(mesh), RenderMode.PHONG, perspective_correct=True)
    _renderer(plain).render(mesh, _facing_normals(mesh), RenderMode.PHONG, perspective_correct=False)
    assert corrected.data == plain.data


def test_depth_buffer_keeps_first_surface_at_equal_depth():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    renderer = _renderer(rb)
    renderer.render(mesh, _facing_normals(mesh), RenderMode.FLAT, base=230)
    renderer.render(mesh, _facing_normals(mesh), RenderMode.FLAT, base=100)
    assert rb.get_pixel(8, 8)[0] == 230
    assert rb.depth[8 * 20 + 8] == pytest.approx(-2.0)


def test_wireframe_overwrites_edges():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    _renderer(rb).render_gouraud(mesh, _facing_normals(mesh), True)
    assert rb.get_pixel(10, 5)[0] == 255
    assert rb.get_pixel(8, 8)[0] == 230


def test_back_facing_face_is_culled():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = Mesh3D()
    a = mesh.add_vertex(Point3D(0.0, 0.0, -2.0))
    b = mesh.add_vertex(Point3D(1.0, 0.0, -2.0))
    c = mesh.add_vertex(Point3D(0.0, 1.0, -2.0))
    mesh.add_face([a, b, c])
    _renderer(rb).render_gouraud(mesh, _facing_normals(mesh), True)
    _assert_untouched(rb)


def test_unmirrored_orthographic_culls_both_windings():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    renderer = _renderer(rb, Projection3D(ProjectionType.ORTHOGRAPHIC))
    renderer.render_gouraud(mesh, _facing_normals(mesh), True)
    _assert_untouched(rb)


def test_mismatched_normals_raise():
    rb = RasterBuffer(20, 20, 1, 0, True)
    mesh = _front_triangle()
    with pytest.raises(ValueError):
        _renderer(rb).render_gouraud(mesh, [Point3D(0.0, 0.0, -1.0)])


def test_shared_vertex_cube_pipeline(tmp_path):
    params = View3DParameters(
        Point3D(2, 2, 5), Point3D(0, 0, 0), Point3D(0, 1, 0), 60.0 * math.pi / 180.0, 1.0, 0.1, 100.0
    )
    cam = params.make_view()
    proj = params.make_projection()

    mesh = Mesh3D()
    s = 1.0
    v = [
        mesh.add_vertex(Point3D(x, y, z))
        for x, y, z in [
            (-s, -s, -s), (s, -s, -s), (s, s, -s), (-s, s, -s),
            (-s, -s, s), (s, -s, s), (s, s, s), (-s, s, s),
        ]
    ]
    for face in (
        [v[0], v[1], v[2], v[3]],
        [v[4], v[5], v[6], v[7]],
        [v[0], v[1], v[5], v[4]],
        [v[2], v[3], v[7], v[6]],
        [v[1], v[2], v[6], v[5]],
        [v[0], v[3], v[7], v[4]],
    ):
        mesh.add_face(face)

    view = cam.view_matrix()
    mesh.vertices = [view.apply(p) for p in mesh.vertices]
    vnorm = mesh.compute_vertex_normals()
    assert all(n.length() == pytest.approx(1.0) for n in vnorm)

    rb = RasterBuffer(512, 512, 1, 0, True)
    rb.clear_depth()
    MeshRenderer2D(rb, cam, proj, Point3D(0, 0, -1)).render_gouraud(mesh, vnorm, True)

    path = tmp_path / "mesh_cube_gouraud.ppm"
    rb.save_ppm(path)
    content = path.read_bytes()
    header = b"P6\n512 512\n255\n"
    assert content.startswith(header)
    assert len(content) == len(header) + 512 * 512 * 3