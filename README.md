# rasterkit

A small software rasterizer in pure Python with no third-party dependencies.
It draws into an in-memory 8-bit pixel buffer and writes binary PPM (P6) images.

## Modules

- `rasterkit.points` – `Point2D` and `Point3D`, immutable vectors with `+`, `-`,
  `*` (by a number), `/`, `dot`, `cross` (3D), `length`, `normalized` and `distance_to`.
- `rasterkit.lines` – `Line2D` and `Line3D` segments with `length`, `midpoint`,
  `direction` and `interpolate`.
- `rasterkit.polygon` – `Polygon3D` with `add_vertex`, `edge`, `centroid`,
  `normal` (from the first three vertices) and `area`.
- `rasterkit.transforms` – `Transformation2D` (3×3) and `Transformation3D` (4×4)
  homogeneous matrices: `identity`, `translation`, `scaling`, `rotation` /
  `rotation_x`, `rotation_y`, `rotation_z`, and `apply`. Compose with `a @ b`
  (the result applies `b` first, then `a`).
- `rasterkit.projection` – `Projection3D` (`ProjectionType.ORTHOGRAPHIC` or
  `ProjectionType.PERSPECTIVE`) and `to_viewport`, which maps [-1, 1] coordinates
  to pixels with y flipped.
- `rasterkit.view` – `View3D`, a look-at camera whose `view_matrix()` maps world
  to camera space (looking down -Z), and `View3DParameters`, which builds a
  camera (`make_view`) and a perspective projection (`make_projection`).
- `rasterkit.raster` – `RasterBuffer` with 1, 3 or 4 channels, an optional depth
  buffer (`test_and_set_depth`, `clear_depth`), `set_pixel`, `get_pixel`,
  `clear`, `to_ppm` and `save_ppm`. Invalid sizes or channel counts raise `ValueError`.
- `rasterkit.bresenham` – `line_points` and `circle_points` generators, and
  `line` / `circle` that plot into a buffer.
- `rasterkit.bezier` – `quad`, `cubic`, `tesselate_quadratic`, `tesselate_cubic`.
- `rasterkit.shading` – `lambert`, `lambert01`, `phong`, `phong01`, `gouraud`,
  `clamp255` and `to_u8`.
- `rasterkit.drawing` – `Drawing2D`: `point`, `line`, `polyline`, `polygon`,
  `circle`, `quadratic_bezier`, `cubic_bezier`, and scanline fills
  `fill_polygon`, `fill_polygon_z`, `fill_polygon_shaded` and
  `fill_polygon_phong` (the last three use the depth buffer).
- `rasterkit.graphics` – drawable objects: the abstract `GraphicObject2D`,
  `GOPoint2D`, `GOPolygon2D`, `GOPolyline2D` and `CompoundGraphicObject2D`.
- `rasterkit.scene` – `Scene3D`, a list of polygons with one projection;
  `apply_transformation` and `project_to_2d` (back faces culled).
- `rasterkit.renderer` – `Renderer2D`, which fills and outlines a `Scene3D` with
  `"lambert"`, `"phong"` or `"gouraud"` shading; any other mode raises `ValueError`.
- `rasterkit.mesh` – `Mesh3D` and `Face` (indexed faces, Newell face normals,
  area-weighted vertex normals) and `make_uv_sphere`.
- `rasterkit.mesh_renderer` – `MeshRenderer2D`, a triangle rasterizer for meshes
  with `RenderMode.FLAT`, `RenderMode.GOURAUD` and `RenderMode.PHONG`, plus the
  shortcuts `render_gouraud` and `render_phong`.
- `rasterkit.demo` – the example scenes behind the `rasterkit-demo` command.

## Installation

```
pip install .
```

## Quick start

Draw 2D primitives:

```python
from rasterkit.raster import RasterBuffer
from rasterkit.drawing import Drawing2D
from rasterkit.points import Point2D

rb = RasterBuffer(256, 256)
d = Drawing2D(rb)
d.line(Point2D(0, 128), Point2D(255, 128), 128)
d.circle(Point2D(128, 128), 60, 200)
d.cubic_bezier(Point2D(20, 200), Point2D(64, 20), Point2D(192, 236), Point2D(236, 56), 64, 255)
rb.save_ppm("out.ppm")
```

Render a shaded sphere:

```python
import math
from rasterkit.view import View3DParameters
from rasterkit.points import Point3D
from rasterkit.mesh import make_uv_sphere
from rasterkit.raster import RasterBuffer
from rasterkit.mesh_renderer import MeshRenderer2D

params = View3DParameters(Point3D(0, 0, 5), Point3D(0, 0, 0), Point3D(0, 1, 0),
                          math.radians(60), 1.0, 0.1, 100.0)
camera = params.make_view()
projection = params.make_projection()

sphere = make_uv_sphere(32, 48, 1.2)
view = camera.view_matrix()
sphere.vertices = [view.apply(p) for p in sphere.vertices]
normals = sphere.compute_vertex_normals()

rb = RasterBuffer(600, 600, enable_depth=True)
renderer = MeshRenderer2D(rb, camera, projection, Point3D(0.3, 0.4, -1.0))
renderer.render_phong(sphere, normals, False, 230, 0.7, 0.4, 32.0)
rb.save_ppm("sphere_phong.ppm")
```

The renderers expect geometry already in view space (camera at the origin);
apply the camera's `view_matrix()` to the vertices first.

## Demo

```
rasterkit-demo [geometry|sphere|cube|all] [-o OUTPUT_DIR]
```

`geometry` prints a short report of point, line, polygon and 2D transform
computations. `sphere` writes `sphere_gouraud.ppm` and `sphere_phong.ppm`;
`cube` writes `mesh_cube_gouraud.ppm` (Gouraud shading with a wireframe).
With no argument all three run. Images go to the current directory unless
`-o` names another.

## Limitations

- Output is PPM only; there is no window or on-screen display, and no image
  or model files are read.
- There is no clipping: in perspective projection, points at or in front of
  the near plane are mapped to the origin rather than clipped.
- Colour buffers can be written, but the drawing and rendering functions
  write a single gray value per pixel.

## Running the tests

```
pip install ".[test]"
pytest
```