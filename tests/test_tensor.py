import numpy as np
import pytest

from pixview.image import ImageDataError
from pixview.image_info import ImageInfo, PixelFormat
from pixview.tensor import (
    ColorFormat,
    Guess,
    Interlaced,
    Planar,
    as_image,
    as_image_guess,
    as_image_guess_bgr,
    as_image_guess_rgb,
    as_interlaced_bgr8,
    as_interlaced_bgra8,
    as_interlaced_rgb8,
    as_interlaced_rgba8,
    as_mono8,
    as_planar_bgr8,
    as_planar_bgra8,
    as_planar_rgb8,
    as_planar_rgba8,
    image_from_result,
)


def data120():
    return np.arange(120, dtype=np.uint8)


def data60():
    return np.arange(60, dtype=np.uint8)


@pytest.mark.parametrize(
    "shape, func, expected",
    [
        ((12, 10, 1), as_image_guess_bgr, ImageInfo.mono8(10, 12)),
        ((1, 12, 10), as_image_guess_bgr, ImageInfo.mono8(10, 12)),
        ((12, 10), as_image_guess_bgr, ImageInfo.mono8(10, 12)),
        ((8, 5, 3), as_image_guess_rgb, ImageInfo.rgb8(5, 8)),
        ((8, 5, 3), as_image_guess_bgr, ImageInfo.bgr8(5, 8)),
        ((5, 6, 4), as_image_guess_rgb, ImageInfo.rgba8(6, 5)),
        ((5, 6, 4), as_image_guess_bgr, ImageInfo.bgra8(6, 5)),
        ((3, 8, 5), as_image_guess_rgb, ImageInfo.rgb8(5, 8)),
        ((3, 8, 5), as_image_guess_bgr, ImageInfo.bgr8(5, 8)),
        ((4, 5, 6), as_image_guess_rgb, ImageInfo.rgba8(6, 5)),
        ((4, 5, 6), as_image_guess_bgr, ImageInfo.bgra8(6, 5)),
    ],
)
def test_guess_tensor_info(shape, func, expected):
    assert func(data120().reshape(shape)).info == expected


@pytest.mark.parametrize("shape", [(120,), (2, 10, 6), (6, 10, 2), (8, 5, 3, 1), (4, 5, 6, 1)])
def test_guess_tensor_info_fails(shape):
    with pytest.raises(ImageDataError):
        as_image_guess_rgb(data120().reshape(shape))


def test_guess_planar_flag():
    assert as_image_guess_rgb(data120().reshape(3, 8, 5)).planar is True
    assert as_image_guess_rgb(data120().reshape(8, 5, 3)).planar is False
    assert as_image_guess_rgb(data120().reshape(1, 12, 10)).planar is False


@pytest.mark.parametrize(
    "shape, func, expected",
    [
        ((12, 5, 1), as_mono8, ImageInfo.mono8(5, 12)),
        ((12, 5), as_mono8, ImageInfo.mono8(5, 12)),
        ((4, 5, 3), as_interlaced_rgb8, ImageInfo.rgb8(5, 4)),
        ((4, 5, 3), as_interlaced_bgr8, ImageInfo.bgr8(5, 4)),
        ((3, 5, 4), as_interlaced_rgba8, ImageInfo.rgba8(5, 3)),
        ((3, 5, 4), as_interlaced_bgra8, ImageInfo.bgra8(5, 3)),
    ],
)
def test_tensor_info_interlaced_with_known_format(shape, func, expected):
    assert func(data60().reshape(shape)).info == expected


@pytest.mark.parametrize(
    "shape, func",
    [
        ((12, 5, 1, 1), as_mono8),
        ((6, 5, 2), as_mono8),
        ((3, 5, 4), as_mono8),
        ((4, 5, 3), as_mono8),
        ((60,), as_mono8),
        ((4, 5, 3, 1), as_interlaced_bgr8),
        ((3, 5, 4), as_interlaced_bgr8),
        ((15, 4), as_interlaced_rgb8),
        ((3, 5, 4, 1), as_interlaced_rgba8),
        ((3, 5, 4, 1), as_interlaced_bgra8),
        ((4, 5, 3), as_interlaced_rgba8),
        ((4, 5, 3), as_interlaced_bgra8),
        ((15, 4), as_interlaced_rgba8),
        ((15, 4), as_interlaced_bgra8),
    ],
)
def test_tensor_info_interlaced_with_known_format_fails(shape, func):
    with pytest.raises(ImageDataError):
        func(data60().reshape(shape))


@pytest.mark.parametrize(
    "shape, func, expected",
    [
        ((3, 4, 5), as_planar_rgb8, ImageInfo.rgb8(5, 4)),
        ((3, 4, 5), as_planar_bgr8, ImageInfo.bgr8(5, 4)),
        ((4, 3, 5), as_planar_rgba8, ImageInfo.rgba8(5, 3)),
        ((4, 3, 5), as_planar_bgra8, ImageInfo.bgra8(5, 3)),
    ],
)
def test_tensor_info_planar_with_known_format(shape, func, expected):
    result = func(data60().reshape(shape))
    assert result.info == expected
    assert result.planar is True


@pytest.mark.parametrize(
    "shape, func",
    [
        ((4, 5, 3, 1), as_planar_bgr8),
        ((4, 5, 3), as_planar_bgr8),
        ((15, 4), as_planar_rgb8),
        ((3, 5, 4, 1), as_planar_rgba8),
        ((3, 5, 4, 1), as_planar_bgra8),
        ((3, 5, 4), as_planar_rgba8),
        ((3, 5, 4), as_planar_bgra8),
        ((15, 4), as_planar_rgba8),
        ((15, 4), as_planar_bgra8),
    ],
)
def test_tensor_info_planar_with_known_format_fails(shape, func):
    with pytest.raises(ImageDataError):
        func(data60().reshape(shape))


def test_error_message_for_wrong_channels():
    with pytest.raises(ImageDataError, match=r"expected shape \(3, height, width\), found \(4, 5, 3\)"):
        as_planar_rgb8(data60().reshape(4, 5, 3))


def test_as_image_with_explicit_formats():
    tensor = data60().reshape(4, 5, 3)
    assert as_image(tensor, Interlaced(PixelFormat.RGB8)).info == ImageInfo.rgb8(5, 4)
    assert as_image(data60().reshape(3, 4, 5), Planar(PixelFormat.BGR8)).info == ImageInfo.bgr8(5, 4)
    assert as_image(tensor, Guess(ColorFormat.BGR)).info == ImageInfo.bgr8(5, 4)
    assert as_image_guess(tensor, ColorFormat.RGB).info == ImageInfo.rgb8(5, 4)


def test_interlaced_to_image_keeps_bytes():
    tensor = data60().reshape(4, 5, 3)
    view = as_interlaced_rgb8(tensor).to_image().as_image_view()
    assert view.info == ImageInfo.rgb8(5, 4)
    assert bytes(view.data) == bytes(range(60))


def test_planar_to_image_interlaces_channels():
    tensor = np.arange(6, dtype=np.uint8).reshape(3, 1, 2)
    view = as_planar_rgb8(tensor).to_image().as_image_view()
    assert bytes(view.data) == bytes([0, 2, 4, 1, 3, 5])
    assert view.info == ImageInfo.rgb8(2, 1)


def test_to_image_converts_to_uint8():
    tensor = np.array([[1.7, 2.2], [3.9, 4.0]])
    view = as_mono8(tensor).to_image().as_image_view()
    assert bytes(view.data) == bytes([1, 2, 3, 4])


def test_image_from_result_with_tensor_image():
    image = image_from_result(as_mono8(data60().reshape(12, 5)))
    assert image.as_image_view().info == ImageInfo.mono8(5, 12)


def test_image_from_result_with_error():
    image = image_from_result(ImageDataError("bad tensor"))
    with pytest.raises(ImageDataError, match="bad tensor"):
        image.as_image_view()


def test_as_image_rejects_unknown_format():
    with pytest.raises(TypeError):
        as_image(data60(), PixelFormat.RGB8)