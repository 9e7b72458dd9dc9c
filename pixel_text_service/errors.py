"""Exception hierarchy for the pixel text service.

Every failure a request can hit is a ``ServiceError`` subclass. The API layer
turns them into ``ErrorResponse`` bodies; nothing here terminates the worker.
"""


class ServiceError(Exception):
    """Base class for request-scoped failures."""

    status_code: int = 500
    error: str = "internal server error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class DecodeError(ServiceError):
    """Input could not be decoded."""

    status_code = 400


class InvalidEncodingError(DecodeError):
    """Upload contents are not valid base64."""

    error = "invalid base64 encoding"


class UnsupportedImageError(DecodeError):
    """Image codec could not recognise or fully read the bytes."""

    error = "unsupported or corrupt image"


class StagingError(ServiceError):
    """Writing or reading the staged upload failed."""

    status_code = 500
    error = "failed to stage upload"


class ImageTooLargeError(ServiceError):
    status_code = 413
    error = "image too large"


class EncodingTimeoutError(ServiceError):
    status_code = 504
    error = "encoding timed out"
