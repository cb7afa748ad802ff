"""RGB colours and their conversion to packed 0x00BBGGRR pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Colour:
    """A colour with red, green and blue channels."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    @classmethod
    def from_pixel(cls, value: int) -> Colour:
        """Build a colour from a pixel stored as 0x00BBGGRR."""
        return cls(
            (value & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            ((value >> 16) & 0xFF) / 255.0,
        )

    def to_pixel(self, exposure: float) -> int:
        """Convert to a 0x00BBGGRR pixel with respect to an exposure level."""

        def channel(value: float) -> int:
            level = 255.0 * min(1.0 - math.exp(value * exposure), 1.0)
            # Truncate toward zero, then keep the low byte.
            return int(level) & 0xFF

        return (channel(self.blue) << 16) + (channel(self.green) << 8) + channel(self.red)

    def __add__(self, other: Colour) -> Colour:
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __mul__(self, other: Colour | float) -> Colour:
        if isinstance(other, Colour):
            return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Colour(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, other: float) -> Colour:
        return self * other