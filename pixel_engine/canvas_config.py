"""CanvasConfig - Canvas dimensions and display scale."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CanvasConfig:
    """
    Fixed canvas configuration shared by the frame and its presentation layer.

    Args:
        width: Canvas width in logical pixels
        height: Canvas height in logical pixels
        box_size: Display scale factor (physical pixels per logical pixel)
    """

    width: int = 320
    height: int = 240
    box_size: int = 2

    def __post_init__(self):
        for name in ("width", "height", "box_size"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"CanvasConfig.{name} must be a positive integer, got {value!r}")

    @property
    def frame_size(self) -> int:
        """Number of bytes in an RGBA8 frame of this size."""
        return self.width * self.height * 4

    @property
    def window_size(self) -> Tuple[int, int]:
        """Physical (width, height) once scaled by box_size."""
        return (self.width * self.box_size, self.height * self.box_size)
