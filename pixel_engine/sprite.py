"""Sprite - Decoded bitmap composited onto the frame with a binary alpha mask."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .color import Color
from .drawable import Drawable
from .framebuffer import FrameBuffer
from .geometry import Point

logger = logging.getLogger(__name__)


class SpriteLoadError(Exception):
    """Raised when a sprite image cannot be opened or decoded."""


class Sprite(Drawable):
    """
    Bitmap drawn with its bottom-left corner at anchor.

    Loads common image formats (PNG, JPG, GIF, etc.) once at construction.
    Pixels with alpha 0 are skipped; every other pixel is copied verbatim,
    translucent ones included (no blending).
    """

    def __init__(self, image_path: str | Path, anchor: Point):
        """
        Initialize Sprite.

        Args:
            image_path: Path to image file
            anchor: Logical position of the sprite's bottom-left corner

        Raises:
            SpriteLoadError: the file is missing or not a decodable image
        """
        path = Path(image_path)
        try:
            with Image.open(path) as img:
                img.load()
                image = img.convert("RGBA")
        except (OSError, UnidentifiedImageError) as exc:
            logger.error(f"Failed to load sprite '{path}': {exc}")
            raise SpriteLoadError(f"Cannot load sprite '{path}'") from exc

        logger.info(f"Loaded sprite '{path}' ({image.width}x{image.height})")
        self._setup(np.array(image, dtype=np.uint8), anchor, path)

    def _setup(self, image_data: np.ndarray, anchor: Point, image_path: Path | None):
        """Set every instance attribute. All construction paths end here."""
        self.image_path = image_path
        self.anchor = Point(*anchor)
        # Shape: (height, width, 4), RGBA, uint8, row 0 is the top of the image
        self._image_data = image_data
        self._height, self._width = image_data.shape[:2]

    @classmethod
    def _from_pixels(cls, image_data: np.ndarray, anchor: Point, image_path: Path | None) -> "Sprite":
        sprite = cls.__new__(cls)
        sprite._setup(image_data, anchor, image_path)
        return sprite

    @classmethod
    def from_image(cls, image: Image.Image, anchor: Point) -> "Sprite":
        """Build a sprite from an already decoded Pillow image."""
        return cls._from_pixels(np.array(image.convert("RGBA"), dtype=np.uint8), anchor, None)

    def at(self, anchor: Point) -> "Sprite":
        """Same decoded pixels placed at a different anchor."""
        return self._from_pixels(self._image_data, anchor, self.image_path)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def draw(self, frame: FrameBuffer) -> None:
        ax, ay = self.anchor
        # Source row 0 lands at anchor.y + height, later rows move downward
        rows, cols = np.nonzero(self._image_data[:, :, 3])
        for sy, sx in zip(rows.tolist(), cols.tolist()):
            color = Color.from_pixel(self._image_data[sy, sx])
            frame.set_pixel(Point(ax + sx, ay + self._height - sy), color)
