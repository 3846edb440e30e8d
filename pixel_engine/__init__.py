"""pixel_engine - Scan-based rasterization of lines, circles, polygons and sprites into RGBA frames."""

from .canvas_config import CanvasConfig
from .circle import Circle
from .color import BLACK, TRANSPARENT, WHITE, Color
from .drawable import Drawable, clear_background, draw_all, draw_to_frame
from .framebuffer import FrameBuffer
from .geometry import Point
from .line import Line
from .polygon import Polygon, Rectangle
from .sprite import Sprite, SpriteLoadError
from .terminal_display_target import TerminalDisplayTarget

__all__ = [
    "CanvasConfig",
    "FrameBuffer",
    "Point",
    "Color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "Drawable",
    "draw_to_frame",
    "draw_all",
    "clear_background",
    "Line",
    "Circle",
    "Polygon",
    "Rectangle",
    "Sprite",
    "SpriteLoadError",
    "TerminalDisplayTarget",
]
