"""Axis-aligned integer rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Rectangle:
    """A rectangle given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"rectangle size must not be negative: [{self.width}, {self.height}]"
            )

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> "Rectangle":
        """Create a rectangle from X, Y coordinates and the width and height."""
        return cls(x, y, width, height)