"""Showing and saving images through Pillow."""

from __future__ import annotations

import os
from typing import Tuple, Union

from PIL import Image as PILImage

from .image import Image, ImageDataError, ImageView
from .image_info import ImageInfo, PixelFormat

_MODE_FORMATS = {
    "L": PixelFormat.MONO8,
    "LA": PixelFormat.MONO_ALPHA8,
    "La": PixelFormat.MONO_ALPHA8_PREMULTIPLIED,
    "RGB": PixelFormat.RGB8,
    "RGBA": PixelFormat.RGBA8,
    "RGBa": PixelFormat.RGBA8_PREMULTIPLIED,
    "BGR;24": PixelFormat.BGR8,
}


def pixel_format_for_mode(mode: str) -> PixelFormat:
    """Map a Pillow image mode to a pixel format.

    Raises :class:`ImageDataError` for modes without an 8-bit equivalent.
    """
    try:
        return _MODE_FORMATS[mode]
    except KeyError:
        raise ImageDataError(f"unsupported pixel format: {mode}") from None


def pil_image_info(image: PILImage.Image) -> ImageInfo:
    """Describe the layout of the raw bytes of a Pillow image."""
    width, height = image.size
    return ImageInfo.new(pixel_format_for_mode(image.mode), width, height)


def pil_image_view(image: PILImage.Image) -> ImageView:
    """Get a view of the pixel data of a Pillow image."""
    info = pil_image_info(image)
    return ImageView(info, image.tobytes())


def image_from_pil(image: PILImage.Image) -> Image:
    """Convert a Pillow image into an owned image, or an invalid one."""
    try:
        info = pil_image_info(image)
    except ImageDataError as error:
        return Image.invalid(error)
    return Image(info, image.tobytes())


def save_rgba8_image(
    path: Union[str, os.PathLike],
    data: Union[bytes, bytearray, memoryview],
    size: Tuple[int, int],
    row_stride: int,
) -> None:
    """Save 8-bit RGBA data with the given row stride as a PNG file."""
    width, height = size
    row_bytes = width * 4
    data = bytes(data)
    if row_stride < row_bytes:
        raise ValueError(f"row stride {row_stride} is smaller than a row of {row_bytes} bytes")
    if row_stride == row_bytes:
        packed = data
    else:
        packed = b"".join(
            data[start:start + row_bytes] for start in range(0, len(data), row_stride)
        )
    if len(packed) < row_bytes * height:
        raise ValueError(
            f"not enough image data: need {row_bytes * height} bytes, got {len(packed)}"
        )
    picture = PILImage.frombytes("RGBA", (width, height), packed[: row_bytes * height])
    picture.save(path, format="PNG")