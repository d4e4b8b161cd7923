"""Borrowed and owned image data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Union

from .image_info import ImageInfo

BytesLike = Union[bytes, bytearray, memoryview]


class ImageDataError(Exception):
    """Image data could not be interpreted or is not available."""


class _AsImageView(Protocol):
    def as_image_view(self) -> "ImageView": ...


@dataclass(frozen=True, eq=True)
class ImageView:
    """Non-owning view of image data together with its layout."""

    info: ImageInfo
    data: BytesLike

    def as_image_view(self) -> "ImageView":
        """Return the view itself."""
        return self


class Image:
    """Owning image.

    Holds its own copy of the pixel data, wraps any object with an
    ``as_image_view()`` method, or represents an error that is raised
    whenever a view is requested.
    """

    __slots__ = ("_info", "_data", "_source", "_error")

    def __init__(self, info: ImageInfo, data: BytesLike) -> None:
        self._info: Optional[ImageInfo] = info
        self._data: Optional[bytes] = bytes(data)
        self._source: Optional[_AsImageView] = None
        self._error: Optional[ImageDataError] = None

    @classmethod
    def _blank(cls) -> "Image":
        image = cls.__new__(cls)
        image._info = None
        image._data = None
        image._source = None
        image._error = None
        return image

    @classmethod
    def from_view(cls, view: ImageView) -> "Image":
        """Create an image holding a copy of the data of a view."""
        return cls(view.info, view.data)

    @classmethod
    def from_source(cls, source: _AsImageView) -> "Image":
        """Create an image that asks ``source`` for its data when viewed."""
        if isinstance(source, ImageView):
            return cls.from_view(source)
        if not callable(getattr(source, "as_image_view", None)):
            raise TypeError(f"object has no as_image_view() method: {source!r}")
        image = cls._blank()
        image._source = source
        return image

    @classmethod
    def invalid(cls, error: Union[ImageDataError, str]) -> "Image":
        """Create an image that always fails to produce a view."""
        image = cls._blank()
        image._error = error if isinstance(error, ImageDataError) else ImageDataError(error)
        return image

    @property
    def is_valid(self) -> bool:
        """False for an image created by :meth:`invalid`."""
        return self._error is None

    def as_image_view(self) -> ImageView:
        """Get a non-owning view of the image data.

        Raises :class:`ImageDataError` if the data is not available.
        """
        if self._error is not None:
            raise self._error
        if self._source is not None:
            return self._source.as_image_view()
        assert self._info is not None and self._data is not None
        return ImageView(self._info, self._data)

    def copy(self) -> "Image":
        """Return an independent image.

        A wrapped source is snapshotted into owned data; if the source fails,
        the copy is an invalid image carrying the error.
        """
        if self._error is not None:
            return Image.invalid(self._error)
        if self._source is not None:
            try:
                view = self._source.as_image_view()
            except ImageDataError as error:
                return Image.invalid(error)
            return Image.from_view(view)
        assert self._info is not None and self._data is not None
        return Image(self._info, self._data)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Image.invalid({str(self._error)!r})"
        if self._source is not None:
            return f"Image.from_source({self._source!r})"
        return f"Image({self._info!r}, <{len(self._data or b'')} bytes>)"


def image_info(image: _AsImageView) -> ImageInfo:
    """Get the image info of anything with an ``as_image_view()`` method."""
    return image.as_image_view().info