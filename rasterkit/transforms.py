"""Affine transformations as homogeneous matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .points import Point2D, Point3D

Matrix = tuple[tuple[float, ...], ...]


def _fmt(value: float) -> str:
    return format(value, "g")


def _as_matrix(rows: Sequence[Sequence[float]], size: int) -> Matrix:
    matrix = tuple(tuple(row) for row in rows)
    if len(matrix) != size or any(len(row) != size for row in matrix):
        raise ValueError(f"expected a {size}x{size} matrix")
    return matrix


def _identity(size: int) -> Matrix:
    return tuple(
        tuple(1.0 if i == j else 0.0 for j in range(size)) for i in range(size)
    )


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


class Transformation2D:
    """A 3x3 row-major homogeneous transform of the plane."""

    __slots__ = ("m",)

    def __init__(self, m: Sequence[Sequence[float]] | None = None) -> None:
        self.m: Matrix = _identity(3) if m is None else _as_matrix(m, 3)

    @staticmethod
    def identity() -> Transformation2D:
        return Transformation2D()

    @staticmethod
    def translation(dx: float, dy: float) -> Transformation2D:
        return Transformation2D(((1, 0, dx), (0, 1, dy), (0, 0, 1)))

    @staticmethod
    def scaling(sx: float, sy: float) -> Transformation2D:
        return Transformation2D(((sx, 0, 0), (0, sy, 0), (0, 0, 1)))

    @staticmethod
    def rotation(angle: float) -> Transformation2D:
        """Counter-clockwise rotation by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Transformation2D(((c, -s, 0), (s, c, 0), (0, 0, 1)))

    def apply(self, p: Point2D) -> Point2D:
        m = self.m
        return Point2D(
            m[0][0] * p.x + m[0][1] * p.y + m[0][2],
            m[1][0] * p.x + m[1][1] * p.y + m[1][2],
        )

    def __matmul__(self, other: Transformation2D) -> Transformation2D:
        """Compose: the result applies ``other`` first, then ``self``."""
        if not isinstance(other, Transformation2D):
            return NotImplemented
        return Transformation2D(_multiply(self.m, other.m))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transformation2D):
            return NotImplemented
        return self.m == other.m

    def __repr__(self) -> str:
        return f"Transformation2D({self.m!r})"

    def __str__(self) -> str:
        rows = ("[" + ", ".join(_fmt(v) for v in row) + "]" for row in self.m)
        return "[" + ", ".join(rows) + "]"


class Transformation3D:
    """A 4x4 row-major homogeneous transform of space."""

    __slots__ = ("m",)

    def __init__(self, m: Sequence[Sequence[float]] | None = None) -> None:
        self.m: Matrix = _identity(4) if m is None else _as_matrix(m, 4)

    @staticmethod
    def identity() -> Transformation3D:
        return Transformation3D()

    @staticmethod
    def translation(dx: float, dy: float, dz: float) -> Transformation3D:
        return Transformation3D(
            ((1, 0, 0, dx), (0, 1, 0, dy), (0, 0, 1, dz), (0, 0, 0, 1))
        )

    @staticmethod
    def scaling(sx: float, sy: float, sz: float) -> Transformation3D:
        return Transformation3D(
            ((sx, 0, 0, 0), (0, sy, 0, 0), (0, 0, sz, 0), (0, 0, 0, 1))
        )

    @staticmethod
    def rotation_x(angle: float) -> Transformation3D:
        c, s = math.cos(angle), math.sin(angle)
        return Transformation3D(
            ((1, 0, 0, 0), (0, c, -s, 0), (0, s, c, 0), (0, 0, 0, 1))
        )

    @staticmethod
    def rotation_y(angle: float) -> Transformation3D:
        c, s = math.cos(angle), math.sin(angle)
        return Transformation3D(
            ((c, 0, s, 0), (0, 1, 0, 0), (-s, 0, c, 0), (0, 0, 0, 1))
        )

    @staticmethod
    def rotation_z(angle: float) -> Transformation3D:
        c, s = math.cos(angle), math.sin(angle)
        return Transformation3D(
            ((c, -s, 0, 0), (s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))
        )

    def apply(self, p: Point3D) -> Point3D:
        """Transform ``p``, dividing by w when w is non-zero."""
        x, y, z, w = (
            row[0] * p.x + row[1] * p.y + row[2] * p.z + row[3] for row in self.m
        )
        if w != 0.0:
            x, y, z = x / w, y / w, z / w
        return Point3D(x, y, z)

    def __matmul__(self, other: Transformation3D) -> Transformation3D:
        """Compose: the result applies ``other`` first, then ``self``."""
        if not isinstance(other, Transformation3D):
            return NotImplemented
        return Transformation3D(_multiply(self.m, other.m))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transformation3D):
            return NotImplemented
        return self.m == other.m

    def __repr__(self) -> str:
        return f"Transformation3D({self.m!r})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(_fmt(v) for v in row) + "]" for row in self.m
        )