"""Line - Straight segment rasterized with integer Bresenham stepping."""

from .color import Color, BLACK
from .drawable import Drawable
from .framebuffer import FrameBuffer
from .geometry import Point


class Line(Drawable):
    """Segment between two points, both endpoints inclusive."""

    def __init__(self, p1: Point, p2: Point, color: Color):
        self.p1 = Point(*p1)
        self.p2 = Point(*p2)
        self._color = color

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Line":
        """Opaque black line between p1 and p2."""
        return cls(p1, p2, BLACK)

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, color: Color):
        self._color = color

    def draw(self, frame: FrameBuffer) -> None:
        # Always step from the smaller endpoint so both directions give identical pixels
        start, end = sorted((self.p1, self.p2))
        x0, y0 = start
        x1, y1 = end

        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        error = dx + dy

        while True:
            frame.set_pixel(Point(x0, y0), self._color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * error
            if e2 >= dy:
                if x0 == x1:
                    break
                error += dy
                x0 += sx
            if e2 <= dx:
                if y0 == y1:
                    break
                error += dx
                y0 += sy
