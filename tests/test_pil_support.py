import pytest
from PIL import Image as PILImage

from pixview.image import ImageDataError
from pixview.image_info import ImageInfo, PixelFormat
from pixview.pil_support import (
    image_from_pil,
    pil_image_info,
    pil_image_view,
    pixel_format_for_mode,
    save_rgba8_image,
)


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("L", PixelFormat.MONO8),
        ("LA", PixelFormat.MONO_ALPHA8),
        ("RGB", PixelFormat.RGB8),
        ("RGBA", PixelFormat.RGBA8),
        ("RGBa", PixelFormat.RGBA8_PREMULTIPLIED),
        ("BGR;24", PixelFormat.BGR8),
    ],
)
def test_pixel_format_for_mode(mode, expected):
    assert pixel_format_for_mode(mode) is expected


@pytest.mark.parametrize("mode", ["I;16", "F", "1", "P", "CMYK"])
def test_unsupported_modes(mode):
    with pytest.raises(ImageDataError, match="unsupported pixel format"):
        pixel_format_for_mode(mode)


def test_info_of_rgb_image():
    picture = PILImage.new("RGB", (5, 3))
    assert pil_image_info(picture) == ImageInfo.rgb8(5, 3)


def test_info_of_mono_image():
    picture = PILImage.new("L", (4, 7))
    assert pil_image_info(picture) == ImageInfo.mono8(4, 7)


def test_view_data_matches_tobytes():
    picture = PILImage.new("RGBA", (3, 2), (10, 20, 30, 40))
    view = pil_image_view(picture)
    assert view.info == ImageInfo.rgba8(3, 2)
    assert bytes(view.data) == picture.tobytes()
    assert len(view.data) == view.info.byte_size()


def test_image_from_pil_round_trip():
    picture = PILImage.new("RGB", (2, 2), (1, 2, 3))
    image = image_from_pil(picture)
    view = image.as_image_view()
    assert view.info == ImageInfo.rgb8(2, 2)
    assert bytes(view.data) == picture.tobytes()


def test_image_from_pil_unsupported_is_invalid():
    image = image_from_pil(PILImage.new("F", (2, 2)))
    assert image.is_valid is False
    with pytest.raises(ImageDataError, match="unsupported pixel format: F"):
        image.as_image_view()


def test_save_packed_rows(tmp_path):
    picture = PILImage.new("RGBA", (3, 2), (5, 6, 7, 8))
    data = picture.tobytes()
    path = tmp_path / "packed.png"
    save_rgba8_image(path, data, (3, 2), 12)
    with PILImage.open(path) as loaded:
        assert loaded.format == "PNG"
        assert loaded.mode == "RGBA"
        assert loaded.size == (3, 2)
        assert loaded.tobytes() == data


def test_save_padded_rows(tmp_path):
    rows = [bytes([row, 1, 2, 255]) * 2 for row in range(3)]
    padding = b"\x00" * 4
    data = b"".join(row + padding for row in rows)
    path = tmp_path / "padded.png"
    save_rgba8_image(path, data, (2, 3), 12)
    with PILImage.open(path) as loaded:
        assert loaded.size == (2, 3)
        assert loaded.tobytes() == b"".join(rows)


def test_save_rejects_short_data(tmp_path):
    with pytest.raises(ValueError):
        save_rgba8_image(tmp_path / "short.png", b"\x00" * 4, (2, 2), 8)


def test_save_rejects_small_stride(tmp_path):
    with pytest.raises(ValueError):
        save_rgba8_image(tmp_path / "stride.png", b"\x00" * 32, (2, 2), 4)