"""Request and response models for the upload API."""

from pydantic import BaseModel, ConfigDict, Field


class UploadedFile(BaseModel):
    """File descriptor embedded in an upload request."""

    filetype: str = Field(..., description="Client-reported MIME type; not trusted for decoding.")
    contents: str = Field(..., description="Base64 encoded image bytes (standard alphabet, padded).")


class UploadRequest(BaseModel):
    """Body of ``POST /upload``."""

    file: UploadedFile


class EncodedPair(BaseModel):
    """Binary and hexadecimal renderings of one image."""

    model_config = ConfigDict(frozen=True)

    binary: str = Field(..., description="8 binary digits per channel, R then G then B, row-major.")
    hex: str = Field(..., description="2 uppercase hex digits per channel, R then G then B, row-major.")


class ErrorResponse(BaseModel):
    """Error response envelope."""

    message: str = Field(default="", description="Additional context for debugging")
    error: str = Field(..., description="High-level error message")
