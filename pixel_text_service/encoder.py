"""Text renderings of an RGB pixel grid.

Both encodings walk the grid row-major (``y`` outer, ``x`` inner) and emit
each pixel's channels in R, G, B order with no separators. Digits come from
fixed lookup tables, so the output never depends on locale.
"""

import time

from .errors import EncodingTimeoutError
from .models import EncodedPair
from .raster import RasterImage

BINARY_DIGITS = tuple(format(value, "08b") for value in range(256))
HEX_DIGITS = tuple(format(value, "02X") for value in range(256))

BINARY_CHARS_PER_PIXEL = 24
HEX_CHARS_PER_PIXEL = 6


def _encode(image: RasterImage, table: tuple[str, ...], deadline: float | None) -> str:
    parts: list[str] = []
    for y in range(image.height):
        if deadline is not None and time.monotonic() > deadline:
            raise EncodingTimeoutError(f"stopped at row {y} of {image.height}")
        parts.extend(table[channel] for channel in image.row(y))
    return "".join(parts)


def encode_binary(image: RasterImage, deadline: float | None = None) -> str:
    """Each channel as 8 zero-padded binary digits."""
    return _encode(image, BINARY_DIGITS, deadline)


def encode_hex(image: RasterImage, deadline: float | None = None) -> str:
    """Each channel as 2 zero-padded uppercase hex digits."""
    return _encode(image, HEX_DIGITS, deadline)


def encode_pair(image: RasterImage, timeout: float | None = None) -> EncodedPair:
    """
    Produce both encodings of ``image``.

    Args:
        image: Decoded pixel grid
        timeout: Seconds allowed for both encodings together (None for no limit)

    Raises:
        EncodingTimeoutError: if the deadline passes; checked once per row
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    binary = encode_binary(image, deadline)
    hex_text = encode_hex(image, deadline)
    return EncodedPair(binary=binary, hex=hex_text)
