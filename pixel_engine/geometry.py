"""Point - Integer position in logical (bottom-left origin) coordinates."""

from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int
