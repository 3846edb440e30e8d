"""Color - Immutable RGBA value with byte, float and raw pixel conversions."""

from typing import NamedTuple, Sequence


def _saturate(value: float) -> int:
    """Truncate to int and clamp to the 0..255 byte range."""
    return max(0, min(255, int(value)))


class _Channels(NamedTuple):
    r: int
    g: int
    b: int
    a: int


class Color(_Channels):
    """
    Four 8-bit channels. Never mutated, only replaced.

    Every channel must be in 0-255; anything else raises ValueError here
    rather than partway through a draw.
    """

    __slots__ = ()

    def __new__(cls, r: int, g: int, b: int, a: int = 255):
        for name, value in zip("rgba", (r, g, b, a)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel '{name}' out of range 0-255: {value}")
        return super().__new__(cls, int(r), int(g), int(b), int(a))

    @classmethod
    def from_u8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a color from byte channels (0-255)."""
        return cls(r, g, b, a)

    @classmethod
    def from_float(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """
        Build a color from normalized channels (0.0-1.0).

        Each channel is scaled by 255.99 and truncated, so 1.0 maps to 255.
        Values outside the range saturate instead of raising.
        """
        return cls(*(_saturate(v * 255.99) for v in (r, g, b, a)))

    @classmethod
    def from_pixel(cls, pixel: Sequence[int]) -> "Color":
        """Build a color from 4 raw RGBA bytes."""
        if len(pixel) != 4:
            raise ValueError(f"Pixel must have exactly 4 channels, got {len(pixel)}")
        return cls.from_u8(*(int(c) for c in pixel))

    def to_pixel(self) -> bytes:
        """Return the 4 RGBA bytes in buffer order."""
        return bytes(self)


BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)
