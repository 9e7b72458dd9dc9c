"""Processor that turns an uploaded image into binary and hex text."""

import logging
from typing import List

from .config import Settings, settings as default_settings
from .direct import run_blocking
from .encoder import encode_pair
from .models import EncodedPair, UploadedFile, UploadRequest
from .payload import decode_contents
from .processor import BaseProcessor, StatelessAction
from .raster import RasterImage, decode_image
from .staging import HexCache, StagingStore


class UploadProcessor(BaseProcessor):
    """
    Orchestrates one upload: decode payload, stage bytes, decode image,
    encode both renderings, refresh the hex cache.

    Args:
        settings: Service settings (defaults to the global instance)
        logger: Logger to report through (defaults to this module's logger)
    """

    def __init__(self, settings: Settings | None = None, logger: logging.Logger | None = None):
        self.settings = settings or default_settings
        self.logger = logger or logging.getLogger(__name__)
        self.staging = StagingStore(self.settings.staging_dir)
        self.hex_cache = HexCache(self.settings.hex_cache_path, enabled=self.settings.hex_cache_enabled)

    @property
    def name(self) -> str:
        return self.settings.service_name

    @property
    def version(self) -> str:
        return self.settings.service_version

    def get_stateless_actions(self) -> List[StatelessAction]:
        return [
            StatelessAction(
                name="upload",
                path="/upload",
                request_model=UploadRequest,
                response_model=EncodedPair,
                handler=self.handle_upload,
                summary="Encode an uploaded image as binary and hex text.",
                description=(
                    "Accepts a base64 encoded image (any Pillow-readable format, sniffed from "
                    "content) and returns every pixel's R, G and B channels in row-major order, "
                    "once as 8-digit binary and once as 2-digit uppercase hex."
                ),
                error_statuses=(400, 413, 500, 504),
            ),
        ]

    def load_raster(self, image_bytes: bytes) -> RasterImage:
        """Stage ``image_bytes`` under a per-request name and decode them."""
        with self.staging.staged(image_bytes) as path:
            return decode_image(path, max_pixels=self.settings.max_image_pixels)

    def read_upload(self, upload: UploadedFile) -> RasterImage:
        """Decode the base64 contents of ``upload``, then stage and decode the image."""
        image_bytes = decode_contents(upload.contents)
        self.logger.info(
            "Received %d byte upload (declared type %r)", len(image_bytes), upload.filetype
        )
        return self.load_raster(image_bytes)

    async def handle_upload(self, request: UploadRequest) -> EncodedPair:
        image = await run_blocking(self.read_upload, request.file)
        encoded = await run_blocking(encode_pair, image, self.settings.encode_timeout_seconds)
        self.logger.info("Encoded %dx%d image", image.width, image.height)

        await run_blocking(self.hex_cache.store, encoded.hex)
        return encoded
