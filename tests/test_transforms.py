import math

import pytest

from rasterkit.points import Point2D, Point3D
from rasterkit.transforms import Transformation2D, Transformation3D


def test_2d_rotate_then_translate():
    p = Point2D(1, 0)
    rotated = Transformation2D.rotation(math.pi / 2).apply(p)
    moved = Transformation2D.translation(2, 3).apply(rotated)
    assert str(p) == "(1, 0)"
    assert str(rotated) == "(6.12323e-17, 1)"
    assert moved.x == pytest.approx(2)
    assert moved.y == pytest.approx(4)
    assert str(moved) == "(2, 4)"


def test_3d_rotate_then_translate():
    p = Point3D(1, 0, 0)
    rotated = Transformation3D.rotation_z(math.pi / 2).apply(p)
    moved = Transformation3D.translation(0, 0, 5).apply(rotated)
    assert str(rotated) == "(6.12323e-17, 1, 0)"
    assert str(moved) == "(6.12323e-17, 1, 5)"


def test_2d_identity_and_scaling():
    p = Point2D(3, -2)
    assert Transformation2D.identity().apply(p) == p
    assert Transformation2D.scaling(2, 3).apply(p) == Point2D(6, -6)


def test_2d_composition_applies_right_first():
    rot = Transformation2D.rotation(0.7)
    trans = Transformation2D.translation(2, 3)
    p = Point2D(1.5, -0.5)
    combined = (trans @ rot).apply(p)
    step = trans.apply(rot.apply(p))
    assert combined.x == pytest.approx(step.x)
    assert combined.y == pytest.approx(step.y)


def test_3d_composition_applies_right_first():
    a = Transformation3D.rotation_y(0.6)
    b = Transformation3D.rotation_x(-0.3)
    c = Transformation3D.translation(1, 2, 3)
    p = Point3D(0.2, -1.0, 4.0)
    combined = (c @ a @ b).apply(p)
    step = c.apply(a.apply(b.apply(p)))
    assert combined.x == pytest.approx(step.x)
    assert combined.y == pytest.approx(step.y)
    assert combined.z == pytest.approx(step.z)


def test_3d_rotations_preserve_length():
    p = Point3D(1, 2, 3)
    for t in (
        Transformation3D.rotation_x(1.1),
        Transformation3D.rotation_y(-0.4),
        Transformation3D.rotation_z(2.5),
    ):
        assert t.apply(p).length() == pytest.approx(p.length())


def test_3d_rotation_axes():
    q = Transformation3D.rotation_x(math.pi / 2).apply(Point3D(0, 1, 0))
    assert (q.x, q.y, q.z) == pytest.approx((0, 0, 1))
    q = Transformation3D.rotation_y(math.pi / 2).apply(Point3D(0, 0, 1))
    assert (q.x, q.y, q.z) == pytest.approx((1, 0, 0))


def test_3d_scaling_and_identity():
    p = Point3D(1, -2, 3)
    assert Transformation3D.scaling(2, 3, 4).apply(p) == Point3D(2, -6, 12)
    assert Transformation3D.identity().apply(p) == p
    assert Transformation3D.identity() @ Transformation3D.identity() == Transformation3D()


def test_3d_perspective_divide():
    m = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 2]]
    assert Transformation3D(m).apply(Point3D(2, 4, 6)) == Point3D(1, 2, 3)


def test_3d_zero_w_skips_divide():
    m = [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 0]]
    assert Transformation3D(m).apply(Point3D(2, 4, 6)) == Point3D(2, 4, 6)


def test_str_output():
    assert str(Transformation2D.translation(2, 3)) == "[[1, 0, 2], [0, 1, 3], [0, 0, 1]]"
    assert str(Transformation3D.scaling(2, 3, 4)) == (
        "[2, 0, 0, 0]\n[0, 3, 0, 0]\n[0, 0, 4, 0]\n[0, 0, 0, 1]"
    )


def test_bad_matrix_shape():
    with pytest.raises(ValueError):
        Transformation2D([[1, 0], [0, 1]])
    with pytest.raises(ValueError):
        Transformation3D([[1, 0, 0], [0, 1, 0], [0, 0, 1]])