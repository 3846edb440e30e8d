"""Drawable base class and frame-level drawing helpers."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from .color import Color
from .framebuffer import FrameBuffer

logger = logging.getLogger(__name__)


class Drawable(ABC):
    """
    Base class for everything that can rasterize itself into a frame.

    draw() is a pure side effect on the frame: it returns nothing, never
    mutates the shape, and drawing the same shape twice gives the same pixels.
    """

    @abstractmethod
    def draw(self, frame: FrameBuffer) -> None:
        """Render self into frame."""
        pass


def draw_to_frame(frame: FrameBuffer, shape: Drawable):
    """Draw any Drawable into frame."""
    shape.draw(frame)


def draw_all(frame: FrameBuffer, shapes: Iterable[Drawable]):
    """Draw shapes in order. Later shapes overwrite earlier ones."""
    count = 0
    for shape in shapes:
        shape.draw(frame)
        count += 1
    logger.debug(f"draw_all() drew {count} shapes")


def clear_background(frame: FrameBuffer, color: Color):
    """Fill the whole frame with color."""
    frame.clear(color)
