from rasterkit.lines import Line2D, Line3D
from rasterkit.points import Point2D, Point3D


def test_line2d_output_and_length():
    line = Line2D(Point2D(0, 0), Point2D(3, 4))
    assert str(line) == "[(0, 0) -> (3, 4)]"
    assert line.length() == 5


def test_line3d_output_and_length():
    line = Line3D(Point3D(0, 0, 0), Point3D(0, 3, 4))
    assert str(line) == "[(0, 0, 0) -> (0, 3, 4)]"
    assert line.length() == 5


def test_line2d_midpoint_direction_interpolate():
    line = Line2D(Point2D(0, 0), Point2D(3, 4))
    assert line.midpoint() == Point2D(1.5, 2)
    assert line.direction() == Point2D(0.6, 0.8)
    assert line.interpolate(0) == line.p1
    assert line.interpolate(1) == line.p2
    assert line.interpolate(0.5) == line.midpoint()


def test_line3d_midpoint_direction_interpolate():
    line = Line3D(Point3D(0, 0, 0), Point3D(0, 3, 4))
    assert line.midpoint() == Point3D(0, 1.5, 2)
    assert line.direction() == Point3D(0, 0.6, 0.8)
    assert line.interpolate(0) == line.p1
    assert line.interpolate(1) == line.p2
    assert line.interpolate(2) == Point3D(0, 6, 8)


def test_default_lines_are_degenerate():
    assert Line2D().length() == 0
    assert Line3D().direction() == Point3D(0, 0, 0)
    assert str(Line3D()) == "[(0, 0, 0) -> (0, 0, 0)]"