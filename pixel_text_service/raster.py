"""Decoded pixel grids and the Pillow-backed image decoder."""

import logging
import os
from typing import Iterable, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import ImageTooLargeError, StagingError, UnsupportedImageError

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int, int]

# 16-bit sample -> nearest 8-bit value; Pillow clamps wider "I" samples to 0..65535.
WIDE_TO_8BIT = [(value + 128) // 257 for value in range(65536)]


class RasterImage:
    """
    Read-only RGB pixel grid.

    Channels are stored packed, row-major, three bytes per pixel (R, G, B).
    """

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, data: bytes):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid dimensions {width}x{height}")
        if len(data) != width * height * 3:
            raise ValueError(
                f"Expected {width * height * 3} channel bytes for {width}x{height}, got {len(data)}"
            )
        self._width = width
        self._height = height
        self._data = bytes(data)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def pixel(self, x: int, y: int) -> Pixel:
        """Return the (R, G, B) channel values at column ``x``, row ``y``."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} image")
        offset = (y * self._width + x) * 3
        data = self._data
        return data[offset], data[offset + 1], data[offset + 2]

    def row(self, y: int) -> bytes:
        """Packed RGB bytes of row ``y``."""
        start = y * self._width * 3
        return self._data[start:start + self._width * 3]

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        """Snapshot a Pillow image as RGB; alpha and other extra bands are dropped.

        16-bit grayscale ("I;16*", "I") is scaled down to 8 bits rather than clipped.
        """
        if image.mode == "I" or image.mode.startswith("I;16"):
            image = image.convert("I").point(WIDE_TO_8BIT, "L")
        rgb = image if image.mode == "RGB" else image.convert("RGB")
        return cls(rgb.width, rgb.height, rgb.tobytes())

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Pixel]) -> "RasterImage":
        """Build a grid from (R, G, B) tuples listed in row-major order."""
        data = bytes(channel for pixel in pixels for channel in pixel)
        return cls(width, height, data)

    def __repr__(self) -> str:
        return f"RasterImage(width={self._width}, height={self._height})"


def decode_image(path: str | os.PathLike, max_pixels: int | None = None) -> RasterImage:
    """
    Decode the image file at ``path``.

    The format is sniffed from the file contents by Pillow.

    Args:
        path: Staged image file
        max_pixels: Reject images with more pixels than this (None disables)

    Raises:
        StagingError: the file could not be opened
        UnsupportedImageError: unrecognised, truncated or otherwise unreadable data
        ImageTooLargeError: pixel count exceeds ``max_pixels``
    """
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise StagingError(f"could not read staged file {path}: {exc}") from exc

    with handle:
        try:
            with Image.open(handle) as img:
                width, height = img.size
                if max_pixels is not None and width * height > max_pixels:
                    raise ImageTooLargeError(
                        f"{width}x{height} exceeds the limit of {max_pixels} pixels"
                    )
                logger.debug("Decoding %s image %dx%d (%s)", img.format, width, height, img.mode)
                img.load()
                return RasterImage.from_pil(img)
        except UnidentifiedImageError as exc:
            raise UnsupportedImageError("image format not recognised") from exc
        except Image.DecompressionBombError as exc:
            raise ImageTooLargeError(str(exc)) from exc
        except (OSError, SyntaxError, ValueError, EOFError) as exc:
            raise UnsupportedImageError(f"could not decode image: {exc}") from exc
