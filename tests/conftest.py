"""Shared pytest fixtures for the pixel text service tests."""

import base64
import io
from pathlib import Path
from typing import Callable, Iterable

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from pixel_text_service import ServiceConfig, Settings, UploadProcessor, create_app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings whose staging directory and hex cache live under ``tmp_path``."""
    return Settings(
        staging_dir=str(tmp_path / "staging"),
        hex_cache_path=str(tmp_path / "staging" / "hex-cache.txt"),
        hex_cache_enabled=True,
        encode_timeout_seconds=30.0,
    )


@pytest.fixture
def processor(test_settings: Settings) -> UploadProcessor:
    return UploadProcessor(test_settings)


@pytest.fixture
def app(processor: UploadProcessor, test_settings: Settings):
    return create_app(processor, ServiceConfig(name="pixel-text-test"), test_settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def build_image(width: int, height: int, pixels: Iterable[tuple], mode: str = "RGB") -> Image.Image:
    image = Image.new(mode, (width, height))
    image.putdata(list(pixels))
    return image


def image_bytes(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def upload_body(data: bytes, filetype: str = "image/png") -> dict:
    return {"file": {"filetype": filetype, "contents": base64.b64encode(data).decode("ascii")}}


@pytest.fixture
def png_factory() -> Callable[..., bytes]:
    """Return a function building PNG bytes from (R, G, B) pixels in row-major order."""

    def _make(width: int, height: int, pixels: Iterable[tuple], mode: str = "RGB") -> bytes:
        return image_bytes(build_image(width, height, pixels, mode))

    return _make


@pytest.fixture
def gradient_image() -> Image.Image:
    """A 64x48 RGB image with distinct values across rows and columns."""
    width, height = 64, 48
    pixels = [((x * 7) % 256, (y * 13) % 256, (x * y) % 256) for y in range(height) for x in range(width)]
    return build_image(width, height, pixels)
