"""FrameBuffer - Borrowed RGBA pixel buffer with logical addressing."""

import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from .canvas_config import CanvasConfig
from .color import Color, TRANSPARENT
from .geometry import Point

logger = logging.getLogger(__name__)


class FrameBuffer:
    """
    RGBA8 view over a caller-owned byte buffer.

    The buffer is row-major with the top row first, while callers address it
    in logical coordinates (origin bottom-left, y increasing upward).
    set_pixel() is the only place that knows about this layout and clipping.
    """

    def __init__(self, config: CanvasConfig, data):
        """
        Wrap an existing buffer. No pixel storage is allocated.

        Args:
            config: Canvas dimensions
            data: Writable bytearray, memoryview or uint8 numpy array of
                  exactly config.frame_size bytes
        """
        self.config = config
        self.width = config.width
        self.height = config.height

        if isinstance(data, np.ndarray):
            if data.dtype != np.uint8:
                raise ValueError(f"Frame array must be uint8, got {data.dtype}")
            # reshape() of a non-contiguous array copies, so writes would never reach the caller
            if not data.flags.c_contiguous:
                raise ValueError("Frame array must be C-contiguous")
            view = data.reshape(-1)
        else:
            view = np.frombuffer(data, dtype=np.uint8)

        if view.size != config.frame_size:
            raise ValueError(
                f"Frame must be exactly {config.frame_size} bytes "
                f"({config.width}x{config.height}x4), got {view.size}"
            )
        if not view.flags.writeable:
            raise ValueError("Frame buffer is read-only")

        # Flat, shape (width * height * 4,)
        self.data = view
        logger.debug(f"FrameBuffer wrapped {view.size} bytes ({self.width}x{self.height})")

    def offset(self, point: Point) -> Optional[int]:
        """Byte offset of a logical point, or None if it lies off the canvas."""
        x, y = point
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        row = self.height - y - 1
        return (row * self.width + x) * 4

    def set_pixel(self, point: Point, color: Color):
        """Overwrite the pixel at point with color. Off-canvas points are dropped."""
        i = self.offset(point)
        if i is None:
            return
        self.data[i:i + 4] = color

    def get_pixel(self, point: Point) -> Color:
        """Read the pixel at point. Off-canvas points read as transparent."""
        i = self.offset(point)
        if i is None:
            return TRANSPARENT
        return Color.from_pixel(self.data[i:i + 4])

    def clear(self, color: Color = TRANSPARENT):
        """Fill the whole canvas with color."""
        self.rows()[:, :] = color

    def rows(self) -> np.ndarray:
        """Shape (height, width, 4) view in buffer order (top row first)."""
        return self.data.reshape(self.height, self.width, 4)

    def to_image(self) -> Image.Image:
        """Snapshot of the frame as a Pillow RGBA image."""
        return Image.fromarray(self.rows().copy())

    def save(self, path: str | Path):
        """Write a snapshot of the frame to an image file."""
        self.to_image().save(path)
        logger.info(f"Saved frame snapshot to {path}")
