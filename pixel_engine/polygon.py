"""Polygon and Rectangle - Closed outlines built from Line segments."""

from typing import Sequence

from .color import Color
from .drawable import Drawable
from .framebuffer import FrameBuffer
from .geometry import Point
from .line import Line


class Polygon(Drawable):
    """
    Closed outline through an ordered list of vertices.

    Each consecutive pair is joined by a Line, then a closing Line runs from
    the last vertex back to the first. Vertex order is kept exactly as given.
    No fill and no self-intersection handling.
    """

    def __init__(self, points: Sequence[Point], color: Color):
        self.points = tuple(Point(*p) for p in points)
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, color: Color):
        self._color = color

    def draw(self, frame: FrameBuffer) -> None:
        if not self.points:
            return

        for p1, p2 in zip(self.points, self.points[1:]):
            Line(p1, p2, self._color).draw(frame)
        Line(self.points[-1], self.points[0], self._color).draw(frame)


class Rectangle(Polygon):
    """Four-cornered outline: p0 -> p1 -> p2 -> p3 -> p0."""

    def __init__(self, p0: Point, p1: Point, p2: Point, p3: Point, color: Color):
        super().__init__((p0, p1, p2, p3), color)
