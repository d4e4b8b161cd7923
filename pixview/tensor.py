"""Displaying array-like tensors as images.

A tensor is anything :func:`numpy.asarray` accepts. Its shape decides how it
is read as an image: ``(height, width)`` for monochrome data,
``(height, width, channels)`` for interlaced data and
``(channels, height, width)`` for planar data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union

import numpy as np

from .image import Image, ImageDataError
from .image_info import ImageInfo, PixelFormat


class ColorFormat(Enum):
    """Preferred colour order when guessing the format of 3 or 4 channel tensors."""

    RGB = "rgb"
    BGR = "bgr"


@dataclass(frozen=True)
class Planar:
    """The tensor holds planar data in the given pixel format."""

    pixel_format: PixelFormat


@dataclass(frozen=True)
class Interlaced:
    """The tensor holds interlaced data in the given pixel format."""

    pixel_format: PixelFormat


@dataclass(frozen=True)
class Guess:
    """Guess the layout from the tensor shape, preferring the given colour order."""

    color_format: ColorFormat


TensorPixelFormat = Union[Planar, Interlaced, Guess]


@dataclass(frozen=True)
class TensorImage:
    """A tensor together with the layout needed to read it as an image."""

    tensor: Any
    info: ImageInfo
    planar: bool

    def to_image(self) -> Image:
        """Copy the tensor into an owned image of interlaced 8-bit data."""
        array = np.asarray(self.tensor)
        if self.planar and array.ndim == 3:
            array = np.transpose(array, (1, 2, 0))
        data = np.ascontiguousarray(array.astype(np.uint8, copy=False)).tobytes()
        return Image(self.info, data)


def _shape(tensor: Any) -> Tuple[int, ...]:
    return tuple(int(n) for n in np.shape(tensor))


def _tensor_info(tensor: Any, pixel_format: PixelFormat, planar: bool) -> ImageInfo:
    expected = pixel_format.channels()
    shape = _shape(tensor)
    dimensions = len(shape)

    if dimensions == 3:
        if planar:
            channels, height, width = shape
            if channels != expected:
                raise ImageDataError(
                    f"expected shape ({expected}, height, width), found {shape}"
                )
        else:
            height, width, channels = shape
            if channels != expected:
                raise ImageDataError(
                    f"expected shape (height, width, {expected}), found {shape}"
                )
        return ImageInfo.new(pixel_format, width, height)
    if dimensions == 2 and expected == 1:
        height, width = shape
        return ImageInfo.new(pixel_format, width, height)
    raise ImageDataError(
        f"wrong number of dimensions ({dimensions}) for format ({pixel_format.name})"
    )


def _guess_tensor_info(tensor: Any, color_format: ColorFormat) -> Tuple[bool, ImageInfo]:
    shape = _shape(tensor)
    dimensions = len(shape)

    if dimensions == 2:
        height, width = shape
        return False, ImageInfo.mono8(width, height)
    if dimensions != 3:
        raise ImageDataError(
            f"unable to guess pixel format for tensor with {dimensions} dimensions, "
            "expected 2 or 3 dimensions"
        )

    a, b, c = shape
    rgb = color_format is ColorFormat.RGB
    if c == 1:
        return False, ImageInfo.mono8(b, a)
    if a == 1:
        # Planar and interlaced are the same for a single channel.
        return False, ImageInfo.mono8(c, b)
    if c == 3:
        return False, (ImageInfo.rgb8 if rgb else ImageInfo.bgr8)(b, a)
    if a == 3:
        return True, (ImageInfo.rgb8 if rgb else ImageInfo.bgr8)(c, b)
    if c == 4:
        return False, (ImageInfo.rgba8 if rgb else ImageInfo.bgra8)(b, a)
    if a == 4:
        return True, (ImageInfo.rgba8 if rgb else ImageInfo.bgra8)(c, b)
    raise ImageDataError(
        f"unable to guess pixel format for tensor with shape {shape}, expected "
        "(height, width) or (height, width, channels) or (channels, height, width) "
        "where channels is either 1, 3 or 4"
    )


def as_image(tensor: Any, pixel_format: TensorPixelFormat) -> TensorImage:
    """Wrap a tensor in a :class:`TensorImage`.

    Raises :class:`ImageDataError` if the shape does not fit the format.
    """
    if isinstance(pixel_format, Planar):
        planar, info = True, _tensor_info(tensor, pixel_format.pixel_format, True)
    elif isinstance(pixel_format, Interlaced):
        planar, info = False, _tensor_info(tensor, pixel_format.pixel_format, False)
    elif isinstance(pixel_format, Guess):
        planar, info = _guess_tensor_info(tensor, pixel_format.color_format)
    else:
        raise TypeError(f"not a tensor pixel format: {pixel_format!r}")
    return TensorImage(tensor, info, planar)


def as_interlaced(tensor: Any, pixel_format: PixelFormat) -> TensorImage:
    """Wrap a tensor holding interlaced data of a known format."""
    return as_image(tensor, Interlaced(pixel_format))


def as_planar(tensor: Any, pixel_format: PixelFormat) -> TensorImage:
    """Wrap a tensor holding planar data of a known format."""
    return as_image(tensor, Planar(pixel_format))


def as_image_guess(tensor: Any, color_format: ColorFormat) -> TensorImage:
    """Wrap a tensor, guessing its format from its shape."""
    return as_image(tensor, Guess(color_format))


def as_image_guess_rgb(tensor: Any) -> TensorImage:
    """Wrap a tensor, reading 3 or 4 channels as RGB."""
    return as_image_guess(tensor, ColorFormat.RGB)


def as_image_guess_bgr(tensor: Any) -> TensorImage:
    """Wrap a tensor, reading 3 or 4 channels as BGR."""
    return as_image_guess(tensor, ColorFormat.BGR)


def as_mono8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding monochrome data."""
    return as_interlaced(tensor, PixelFormat.MONO8)


def as_interlaced_rgb8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding interlaced RGB data."""
    return as_interlaced(tensor, PixelFormat.RGB8)


def as_interlaced_rgba8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding interlaced RGBA data."""
    return as_interlaced(tensor, PixelFormat.RGBA8)


def as_interlaced_bgr8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding interlaced BGR data."""
    return as_interlaced(tensor, PixelFormat.BGR8)


def as_interlaced_bgra8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding interlaced BGRA data."""
    return as_interlaced(tensor, PixelFormat.BGRA8)


def as_planar_rgb8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding planar RGB data."""
    return as_planar(tensor, PixelFormat.RGB8)


def as_planar_rgba8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding planar RGBA data."""
    return as_planar(tensor, PixelFormat.RGBA8)


def as_planar_bgr8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding planar BGR data."""
    return as_planar(tensor, PixelFormat.BGR8)


def as_planar_bgra8(tensor: Any) -> TensorImage:
    """Wrap a tensor holding planar BGRA data."""
    return as_planar(tensor, PixelFormat.BGRA8)


def image_from_result(result: Union[TensorImage, ImageDataError]) -> Image:
    """Turn a tensor image into an image, or an error into an invalid image."""
    if isinstance(result, ImageDataError):
        return Image.invalid(result)
    return result.to_image()