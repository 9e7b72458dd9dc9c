"""Decoding of the base64 ``contents`` field of an upload.

Policy: standard alphabet (``A-Z a-z 0-9 + /``) with canonical ``=`` padding.
Leading and trailing whitespace is stripped; any other character, including
embedded newlines and the URL-safe ``-``/``_`` variants, is rejected.
"""

import base64
import binascii

from .errors import InvalidEncodingError


def decode_contents(contents: str) -> bytes:
    """Return the raw bytes encoded in ``contents``.

    Raises:
        InvalidEncodingError: if ``contents`` is not padded standard base64.
    """
    text = contents.strip()
    if len(text) % 4:
        raise InvalidEncodingError(f"base64 length {len(text)} is not a multiple of 4 (padding is required)")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(f"malformed base64 contents: {exc}") from exc
