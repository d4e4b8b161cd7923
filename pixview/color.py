"""RGBA colours with floating point components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Color:
    """An RGBA colour with components in the range 0 to 1."""

    red: float
    green: float
    blue: float
    alpha: float

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> "Color":
        """A fully opaque colour."""
        return cls.rgba(red, green, blue, 1.0)

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float) -> "Color":
        """A colour from all four components."""
        return cls(red, green, blue, alpha)

    @classmethod
    def black(cls) -> "Color":
        """Fully opaque black."""
        return cls.rgb(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color":
        """Fully opaque white."""
        return cls.rgb(1.0, 1.0, 1.0)