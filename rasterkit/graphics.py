"""Drawable 2D objects that can be grouped and drawn together."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from .drawing import Drawing2D
from .points import Point2D
from .raster import RasterBuffer


class GraphicObject2D(ABC):
    """Something that can draw itself into a raster buffer."""

    @abstractmethod
    def draw(self, rb: RasterBuffer, intensity: int = 255) -> None:
        """Draw into ``rb`` with the given intensity."""


class CompoundGraphicObject2D(GraphicObject2D):
    """A group of objects drawn in the order they were added."""

    def __init__(self, children: Iterable[GraphicObject2D] = ()) -> None:
        self.children: list[GraphicObject2D] = list(children)

    def add(self, obj: GraphicObject2D) -> None:
        self.children.append(obj)

    def draw(self, rb: RasterBuffer, intensity: int = 255) -> None:
        for child in self.children:
            child.draw(rb, intensity)


@dataclass
class GOPoint2D(GraphicObject2D):
    """A single point."""

    p: Point2D

    def draw(self, rb: RasterBuffer, intensity: int = 255) -> None:
        Drawing2D(rb).point(self.p, intensity)


@dataclass
class GOPolygon2D(GraphicObject2D):
    """A closed polygon outline."""

    pts: list[Point2D] = field(default_factory=list)

    def draw(self, rb: RasterBuffer, intensity: int = 255) -> None:
        Drawing2D(rb).polygon(self.pts, intensity)


@dataclass
class GOPolyline2D(GraphicObject2D):
    """An open chain of line segments."""

    pts: list[Point2D] = field(default_factory=list)

    def draw(self, rb: RasterBuffer, intensity: int = 255) -> None:
        Drawing2D(rb).polyline(self.pts, intensity)