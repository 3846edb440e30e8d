"""Circle - Outline rasterized by stepping one octant and mirroring it."""

from .color import Color
from .drawable import Drawable
from .framebuffer import FrameBuffer
from .geometry import Point


class Circle(Drawable):
    """
    Circle outline around center.

    The decision accumulator is seeded with radius / 16 rather than the
    textbook midpoint value, and is kept that way so existing output does not
    change. A radius of 0 draws the center pixel; a negative radius draws
    nothing.
    """

    def __init__(self, center: Point, radius: int, color: Color):
        self.center = Point(*center)
        self.radius = radius
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, color: Color):
        self._color = color

    def draw(self, frame: FrameBuffer) -> None:
        if self.radius < 0:
            return

        cx, cy = self.center
        t1 = self.radius / 16.0
        x1 = float(self.radius)
        y1 = 0.0

        while x1 >= y1:
            # int() truncates toward zero
            for px, py in (
                (int(x1), int(y1)),
                (int(-x1), int(y1)),
                (int(x1), int(-y1)),
                (int(-x1), int(-y1)),
                (int(y1), int(x1)),
                (int(-y1), int(x1)),
                (int(y1), int(-x1)),
                (int(-y1), int(-x1)),
            ):
                frame.set_pixel(Point(px + cx, py + cy), self._color)

            y1 += 1.0
            t1 += y1
            t2 = t1 - x1
            if t2 >= 0.0:
                t1 = t2
                x1 -= 1.0
