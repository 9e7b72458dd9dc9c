"""FastAPI application factory for the pixel text service."""

import inspect
import logging
import time
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .errors import ServiceError
from .models import ErrorResponse
from .processor import BaseProcessor, StatelessAction

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND = ErrorResponse(message="", error="page not found")


@dataclass
class ServiceConfig:
    """
    Configuration for building the application.

    Args:
        name: Override service name (defaults to processor.name)
        version: Override service version (defaults to processor.version)
        description: Short description for generated docs
    """

    name: str | None = None
    version: str | None = None
    description: str | None = None


def error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(
    processor: BaseProcessor,
    config: ServiceConfig | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Create a FastAPI application serving the processor's actions.

    Only the processor's action routes exist; every other method/path pair
    answers 404 with the fixed ``page not found`` body.

    Args:
        processor: The processor instance implementing business logic
        config: Optional service configuration
        settings: Service settings (defaults to the global instance)
    """

    config = config or ServiceConfig()
    settings = settings or default_settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service_name = config.name or processor.name
    service_version = config.version or processor.version
    service_description = config.description or f"{service_name} image encoding API"

    app = FastAPI(
        title=f"{service_name.title()} API",
        description=service_description,
        version=service_version,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.enable_docs else None,
    )

    app.state.processor = processor
    app.state.service_config = config

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s: %s", request.method, request.url.path, exc.error, exc.message)
        else:
            logger.warning("%s %s rejected: %s: %s", request.method, request.url.path, exc.error, exc.message)
        return error_response(exc.status_code, ErrorResponse(message=exc.message, error=exc.error))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is still an unknown route.
        if exc.status_code in (404, 405):
            return error_response(404, PAGE_NOT_FOUND)
        if exc.status_code == 400:
            return error_response(
                400, ErrorResponse(message=str(exc.detail), error="invalid request body")
            )
        return error_response(exc.status_code, ErrorResponse(message=str(exc.detail), error="http error"))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed JSON bodies and missing fields."""
        return error_response(
            422, ErrorResponse(message=str(exc.errors()), error="invalid request body")
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, ErrorResponse(message="", error="internal server error"))

    actions = processor.get_stateless_actions()
    if not actions:
        logger.warning(
            "Processor %s registered but get_stateless_actions() returned nothing.",
            processor.name,
        )

    def make_endpoint(action: StatelessAction):
        RequestModel = action.request_model

        async def endpoint(payload: RequestModel):
            call_result = action.handler(payload)

            if inspect.isawaitable(call_result):
                call_result = await call_result
            return call_result

        return endpoint

    for action in actions:
        logger.info("Registering action '%s' at %s", action.name, action.path)

        route_kwargs = {
            "methods": list(action.methods),
            "response_model": action.response_model,
            "summary": action.summary,
            "description": action.description,
            "responses": {status: {"model": ErrorResponse} for status in action.error_statuses},
        }
        route_kwargs = {k: v for k, v in route_kwargs.items() if v is not None}

        app.api_route(action.path, **route_kwargs)(make_endpoint(action))

    return app
