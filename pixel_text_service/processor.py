"""Base processor interface for the service's request/response actions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List

from pydantic import BaseModel


@dataclass
class StatelessAction:
    """
    A POST-style route backed by a processor method.

    Attributes:
        name: Short identifier used for logging and OpenAPI docs.
        path: Route path (e.g., "/upload").
        handler: Callable invoked with the validated request model.
        request_model: Pydantic model the JSON body is validated against.
        response_model: Pydantic model for the success body.
        methods: HTTP methods to expose.
        summary: Optional OpenAPI summary.
        description: Optional longer description.
        error_statuses: Status codes that may carry an ErrorResponse body.
    """

    name: str
    path: str
    handler: Callable[[BaseModel], Awaitable[Any] | Any]
    request_model: type[BaseModel]
    response_model: type[BaseModel] | None = None
    methods: tuple[str, ...] = ("POST",)
    summary: str | None = None
    description: str | None = None
    error_statuses: tuple[int, ...] = (400, 500)


class BaseProcessor(ABC):
    """Hook point for the service's business logic."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Processor name used for logging and metadata."""

    @property
    def version(self) -> str:
        return "1.0.0"

    def get_stateless_actions(self) -> List[StatelessAction]:
        """Routes this processor serves. Override in subclasses."""
        return []
