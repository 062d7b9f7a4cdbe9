"""Two- and three-dimensional points used as both positions and vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True)
class Point2D:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point2D:
        return Point2D(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: float) -> Point2D:
        return Point2D(self.x / divisor, self.y / divisor)

    def dot(self, other: Point2D) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point2D:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length > 0:
            return Point2D(self.x / length, self.y / length)
        return Point2D(0.0, 0.0)

    def distance_to(self, other: Point2D) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"


@dataclass(frozen=True)
class Point3D:
    """A point or vector in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Point3D) -> Point3D:
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Point3D:
        return Point3D(self.x * factor, self.y * factor, self.z * factor)

    def __truediv__(self, divisor: float) -> Point3D:
        return Point3D(self.x / divisor, self.y / divisor, self.z / divisor)

    def dot(self, other: Point3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point3D) -> Point3D:
        return Point3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Point3D:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length > 0:
            return Point3D(self.x / length, self.y / length, self.z / length)
        return Point3D(0.0, 0.0, 0.0)

    def distance_to(self, other: Point3D) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"