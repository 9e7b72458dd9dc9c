"""Pixel text service: encode uploaded images as binary and hex text."""

from .api import ServiceConfig, create_app
from .config import Settings, settings
from .encoder import encode_binary, encode_hex, encode_pair
from .errors import (
    DecodeError,
    EncodingTimeoutError,
    ImageTooLargeError,
    InvalidEncodingError,
    ServiceError,
    StagingError,
    UnsupportedImageError,
)
from .models import EncodedPair, ErrorResponse, UploadedFile, UploadRequest
from .processor import BaseProcessor, StatelessAction
from .raster import RasterImage, decode_image
from .upload import UploadProcessor

__version__ = "1.0.0"


__all__ = [
    "BaseProcessor",
    "StatelessAction",
    "create_app",
    "ServiceConfig",
    "Settings",
    "settings",
    "encode_binary",
    "encode_hex",
    "encode_pair",
    "RasterImage",
    "decode_image",
    "UploadProcessor",
    "EncodedPair",
    "ErrorResponse",
    "UploadedFile",
    "UploadRequest",
    "ServiceError",
    "DecodeError",
    "InvalidEncodingError",
    "UnsupportedImageError",
    "StagingError",
    "ImageTooLargeError",
    "EncodingTimeoutError",
]
