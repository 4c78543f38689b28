"""RGB colours with floating-point channels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Color:
    """An RGB colour; channels are normally in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color | Number) -> Color:
        """Multiply channel-wise by another colour, or scale by a number."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: Number) -> Color:
        return self * other

    def __truediv__(self, scalar: Number) -> Color:
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def clamped(self) -> Color:
        """Return the colour with every channel limited to 0..1."""
        return Color(*(min(max(c, 0.0), 1.0) for c in (self.r, self.g, self.b)))

    def to_rgb_int(self) -> int:
        """Pack the channels into a 0xRRGGBB integer, truncating each."""
        red, green, blue = (int(255.0 * c) for c in (self.r, self.g, self.b))
        return (red << 16) | (green << 8) | blue