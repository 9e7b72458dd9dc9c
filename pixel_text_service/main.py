"""Entrypoint for the pixel text service."""

from fastapi import FastAPI

from .api import ServiceConfig, create_app
from .config import settings
from .upload import UploadProcessor

processor = UploadProcessor(settings)

app: FastAPI = create_app(
    processor,
    ServiceConfig(
        description="Converts a base64 uploaded image into binary and hexadecimal pixel text.",
    ),
    settings,
)


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
