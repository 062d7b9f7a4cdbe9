"""Line segments in two and three dimensions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .points import Point2D, Point3D


@dataclass(frozen=True)
class Line2D:
    """Segment from ``p1`` to ``p2`` in the plane."""

    p1: Point2D = field(default_factory=Point2D)
    p2: Point2D = field(default_factory=Point2D)

    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    def midpoint(self) -> Point2D:
        return Point2D((self.p1.x + self.p2.x) / 2.0, (self.p1.y + self.p2.y) / 2.0)

    def direction(self) -> Point2D:
        """Unit vector from ``p1`` towards ``p2``."""
        return (self.p2 - self.p1).normalized()

    def interpolate(self, t: float) -> Point2D:
        """Point at ``t``: 0 gives ``p1``, 1 gives ``p2``."""
        return Point2D(
            self.p1.x + t * (self.p2.x - self.p1.x),
            self.p1.y + t * (self.p2.y - self.p1.y),
        )

    def __str__(self) -> str:
        return f"[{self.p1} -> {self.p2}]"


@dataclass(frozen=True)
class Line3D:
    """Segment from ``p1`` to ``p2`` in space."""

    p1: Point3D = field(default_factory=Point3D)
    p2: Point3D = field(default_factory=Point3D)

    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    def midpoint(self) -> Point3D:
        return Point3D(
            (self.p1.x + self.p2.x) / 2.0,
            (self.p1.y + self.p2.y) / 2.0,
            (self.p1.z + self.p2.z) / 2.0,
        )

    def direction(self) -> Point3D:
        """Unit vector from ``p1`` towards ``p2``."""
        return (self.p2 - self.p1).normalized()

    def interpolate(self, t: float) -> Point3D:
        """Point at ``t``: 0 gives ``p1``, 1 gives ``p2``."""
        return Point3D(
            self.p1.x + t * (self.p2.x - self.p1.x),
            self.p1.y + t * (self.p2.y - self.p1.y),
            self.p1.z + t * (self.p2.z - self.p1.z),
        )

    def __str__(self) -> str:
        return f"[{self.p1} -> {self.p2}]"