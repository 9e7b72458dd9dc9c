"""Tests for the upload orchestration outside of HTTP."""

import base64
import logging

import pytest

from pixel_text_service import (
    InvalidEncodingError,
    UnsupportedImageError,
    UploadedFile,
    UploadProcessor,
    UploadRequest,
)
from pixel_text_service import upload as upload_module


def _request(data: bytes) -> UploadRequest:
    return UploadRequest(
        file=UploadedFile(filetype="image/png", contents=base64.b64encode(data).decode("ascii"))
    )


def test_processor_exposes_upload_action(processor):
    """The processor serves a single POST /upload action."""
    actions = processor.get_stateless_actions()

    assert [(a.name, a.path, a.methods) for a in actions] == [("upload", "/upload", ("POST",))]


def test_processor_identity_comes_from_settings(processor, test_settings):
    """Name and version come from settings."""
    assert processor.name == test_settings.service_name
    assert processor.version == test_settings.service_version


@pytest.mark.anyio
async def test_handle_upload(processor, png_factory):
    """handle_upload returns both encodings of the image."""
    result = await processor.handle_upload(_request(png_factory(1, 1, [(255, 16, 1)])))

    assert result.hex == "FF1001"
    assert result.binary == "111111110001000000000001"


@pytest.mark.anyio
async def test_handle_upload_rejects_bad_payload(processor):
    """Invalid base64 raises InvalidEncodingError."""
    request = UploadRequest(file=UploadedFile(filetype="image/png", contents="%%%%"))

    with pytest.raises(InvalidEncodingError):
        await processor.handle_upload(request)


@pytest.mark.anyio
async def test_handle_upload_rejects_bad_image(processor):
    """Undecodable bytes raise UnsupportedImageError."""
    with pytest.raises(UnsupportedImageError):
        await processor.handle_upload(_request(b"not an image at all"))


@pytest.mark.anyio
async def test_injected_logger_receives_records(test_settings, png_factory, caplog):
    """Progress is logged through the injected logger."""
    logger = logging.getLogger("pixel_text_service.tests.injected")
    processor = UploadProcessor(test_settings, logger=logger)

    with caplog.at_level(logging.INFO, logger=logger.name):
        await processor.handle_upload(_request(png_factory(1, 1, [(0, 0, 0)])))

    assert any(record.name == logger.name and "Encoded 1x1" in record.getMessage() for record in caplog.records)


def test_load_raster_cleans_up(processor, png_factory):
    """load_raster decodes the bytes and removes the staged file."""
    image = processor.load_raster(png_factory(2, 1, [(1, 2, 3), (4, 5, 6)]))

    assert image.pixel(1, 0) == (4, 5, 6)
    assert list(processor.staging.directory.iterdir()) == []


def test_read_upload_decodes_and_stages(processor, png_factory):
    """Base64 decoding, staging and image decoding run as one blocking step."""
    image = processor.read_upload(_request(png_factory(1, 1, [(9, 8, 7)])).file)

    assert image.pixel(0, 0) == (9, 8, 7)


@pytest.mark.anyio
async def test_payload_decoding_runs_off_the_event_loop(processor, png_factory, monkeypatch):
    """Every blocking step, base64 decoding included, goes through run_blocking."""
    calls = []

    async def recording_run_blocking(func, *args, **kwargs):
        calls.append(func)
        return func(*args, **kwargs)

    monkeypatch.setattr(upload_module, "run_blocking", recording_run_blocking)
    await processor.handle_upload(_request(png_factory(1, 1, [(0, 0, 0)])))

    assert calls[0] == processor.read_upload
    assert len(calls) == 3
