"""Pixel formats and the layout description of raw image data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

_BYTE_DEPTH = 1


class Alpha(Enum):
    """How the alpha channel of a pixel is represented."""

    UNPREMULTIPLIED = "unpremultiplied"
    """Alpha is stored only in the alpha component."""

    PREMULTIPLIED = "premultiplied"
    """Alpha is also multiplied into the colour components."""


class PixelFormat(Enum):
    """Supported pixel formats, all with 8-bit channels."""

    MONO8 = ("mono8", 1, None)
    MONO_ALPHA8 = ("mono_alpha8", 1, Alpha.UNPREMULTIPLIED)
    MONO_ALPHA8_PREMULTIPLIED = ("mono_alpha8_premultiplied", 1, Alpha.PREMULTIPLIED)
    BGR8 = ("bgr8", 3, None)
    BGRA8 = ("bgra8", 4, Alpha.UNPREMULTIPLIED)
    BGRA8_PREMULTIPLIED = ("bgra8_premultiplied", 4, Alpha.PREMULTIPLIED)
    RGB8 = ("rgb8", 3, None)
    RGBA8 = ("rgba8", 4, Alpha.UNPREMULTIPLIED)
    RGBA8_PREMULTIPLIED = ("rgba8_premultiplied", 4, Alpha.PREMULTIPLIED)

    def __init__(self, label: str, channel_count: int, alpha: Optional[Alpha]) -> None:
        self._label = label
        self._channel_count = channel_count
        self._alpha_kind = alpha

    def channels(self) -> int:
        """Number of channels per pixel."""
        return self._channel_count

    def bytes_per_pixel(self) -> int:
        """Number of bytes used by one pixel."""
        return _BYTE_DEPTH * self._channel_count

    def alpha(self) -> Optional[Alpha]:
        """The alpha representation, or None if the format has no alpha channel."""
        return self._alpha_kind


def _check_dimension(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class ImageInfo:
    """Describes the binary layout of image data.

    ``size`` is ``(width, height)`` in pixels and ``stride`` is the
    ``(x, y)`` step in bytes between neighbouring pixels and rows.
    """

    pixel_format: PixelFormat
    size: Tuple[int, int]
    stride: Tuple[int, int]

    @classmethod
    def new(cls, pixel_format: PixelFormat, width: int, height: int) -> "ImageInfo":
        """Create an info with a tightly packed row stride."""
        _check_dimension("width", width)
        _check_dimension("height", height)
        stride_x = pixel_format.bytes_per_pixel()
        return cls(pixel_format, (width, height), (stride_x, stride_x * width))

    @classmethod
    def mono8(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.MONO8, width, height)

    @classmethod
    def mono_alpha8(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.MONO_ALPHA8, width, height)

    @classmethod
    def mono_alpha8_premultiplied(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.MONO_ALPHA8_PREMULTIPLIED, width, height)

    @classmethod
    def bgr8(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.BGR8, width, height)

    @classmethod
    def bgra8(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.BGRA8, width, height)

    @classmethod
    def bgra8_premultiplied(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.BGRA8_PREMULTIPLIED, width, height)

    @classmethod
    def rgb8(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.RGB8, width, height)

    @classmethod
    def rgba8(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.RGBA8, width, height)

    @classmethod
    def rgba8_premultiplied(cls, width: int, height: int) -> "ImageInfo":
        return cls.new(PixelFormat.RGBA8_PREMULTIPLIED, width, height)

    def byte_size(self) -> int:
        """Size of the image data in bytes."""
        width, height = self.size
        stride_x, stride_y = self.stride
        if stride_y >= stride_x:
            return stride_y * height
        return stride_x * width