import math

import pytest

from rasterkit.points import Point3D
from rasterkit.polygon import Polygon3D
from rasterkit.projection import Projection3D, ProjectionType
from rasterkit.raster import RasterBuffer
from rasterkit.renderer import Renderer2D
from rasterkit.scene import Scene3D
from rasterkit.view import View3D, View3DParameters


def lit(rb):
    return sum(1 for v in rb.data if v)


def cube_setup():
    params = View3DParameters(Point3D(2, 2, 5), Point3D(0, 0, 0), Point3D(0, 1, 0),
                              60.0 * math.pi / 180.0, 1.0, 0.1, 100.0)
    camera = params.make_view()
    proj = params.make_projection()
    scene = Scene3D(proj)
    s = 1.0
    v = [
        Point3D(-s, -s, -s), Point3D(s, -s, -s), Point3D(s, s, -s), Point3D(-s, s, -s),
        Point3D(-s, -s, s), Point3D(s, -s, s), Point3D(s, s, s), Point3D(-s, s, s),
    ]
    for a, b, c, d in ((0, 1, 2, 3), (4, 5, 6, 7), (0, 1, 5, 4),
                       (2, 3, 7, 6), (1, 2, 6, 5), (0, 3, 7, 4)):
        scene.add_object(Polygon3D([v[a], v[b], v[c], v[d]]))
    scene.apply_transformation(camera.view_matrix())
    return camera, proj, scene


@pytest.mark.parametrize("mode", ["lambert", "phong", "gouraud"])
def test_cube_modes(mode):
    camera, proj, scene = cube_setup()
    rb = RasterBuffer(128, 128, 1, 0, True)
    rb.clear_depth()
    Renderer2D(rb, camera, proj, Point3D(0, 0, -1)).render(scene, mode)
    # Perspective maps view-space points with negative z to the image centre.
    assert rb.get_pixel(64, 64)[0] == 255
    assert lit(rb) == 1


def test_cube_zbuffer_default_mode():
    camera, proj, scene = cube_setup()
    rb = RasterBuffer(128, 128, 1, 0, True)
    rb.clear_depth()
    Renderer2D(rb, camera, proj).render(scene)
    assert rb.get_pixel(64, 64)[0] == 255
    assert rb.to_ppm().startswith(b"P6\n128 128\n255\n")


def quad_scene():
    scene = Scene3D(Projection3D(ProjectionType.ORTHOGRAPHIC))
    scene.add_object(Polygon3D([Point3D(-0.5, -0.5, -3), Point3D(-0.5, 0.5, -3),
                                Point3D(0.5, 0.5, -3), Point3D(0.5, -0.5, -3)]))
    return scene


def render_quad(mode):
    scene = quad_scene()
    rb = RasterBuffer(64, 64, enable_depth=True)
    Renderer2D(rb, View3D(), scene.projection).render(scene, mode)
    return rb


def test_lambert_quad_fill_and_outline():
    rb = render_quad("lambert")
    assert rb.get_pixel(32, 32)[0] == 200
    assert rb.get_pixel(16, 16)[0] == 255
    assert rb.get_pixel(4, 4)[0] == 0
    assert rb.depth[32 * 64 + 32] == -3


def test_gouraud_with_face_normals_matches_lambert():
    assert render_quad("gouraud").data == render_quad("lambert").data


def test_phong_quad_has_no_highlight_toward_camera():
    rb = render_quad("phong")
    assert rb.get_pixel(32, 32)[0] == 120
    assert rb.get_pixel(16, 16)[0] == 255


def test_backfacing_polygon_is_culled():
    scene = Scene3D(Projection3D(ProjectionType.ORTHOGRAPHIC))
    scene.add_object(Polygon3D([Point3D(-0.5, -0.5, -3), Point3D(0.5, -0.5, -3),
                                Point3D(0.5, 0.5, -3), Point3D(-0.5, 0.5, -3)]))
    rb = RasterBuffer(64, 64, enable_depth=True)
    Renderer2D(rb, View3D(), scene.projection).render(scene)
    assert lit(rb) == 0


def test_unknown_mode_rejected():
    scene = quad_scene()
    rb = RasterBuffer(16, 16, enable_depth=True)
    with pytest.raises(ValueError):
        Renderer2D(rb, View3D(), scene.projection).render(scene, "toon")