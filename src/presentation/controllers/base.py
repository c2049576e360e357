"""Transport-independent controller contract.

A transport adapter turns its native request into an AdapterRequest, calls
handle() and renders the AdapterResponse. Controllers never raise: every
failure becomes a status code and an {"error": ...} body.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from domain.exceptions import (
    DomainError,
    ValidationFailedError,
    NotFoundError,
    ConflictError,
    UnprocessableStateError,
)
from infrastructure.config import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)


class StatusCode(IntEnum):
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500


@dataclass
class AdapterRequest:
    """Normalised request: query string, path parameters and parsed JSON body."""

    query: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    body: Any = None


@dataclass
class AdapterResponse:
    status: StatusCode
    data: Any = None


class RequestRejected(Exception):
    """Raised by controller helpers when the request itself is malformed."""

    def __init__(self, data: dict[str, Any]):
        super().__init__(data.get("error"))
        self.data = data


# Checked in order; first match wins
ERROR_STATUS: tuple[tuple[type[DomainError], StatusCode], ...] = (
    (ValidationFailedError, StatusCode.BAD_REQUEST),
    (NotFoundError, StatusCode.NOT_FOUND),
    (ConflictError, StatusCode.CONFLICT),
    (UnprocessableStateError, StatusCode.UNPROCESSABLE_ENTITY),
)


def status_for(error: DomainError) -> StatusCode:
    for error_type, status in ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return StatusCode.INTERNAL_SERVER_ERROR


def error_response(status: StatusCode, message: str) -> AdapterResponse:
    return AdapterResponse(status=status, data={"error": message})


class GenericController(ABC):
    """Base controller translating domain failures into responses."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    async def handle(self, request: AdapterRequest) -> AdapterResponse:
        self.logger.info("Start request")
        try:
            response = await self.process(request)
        except RequestRejected as e:
            self.logger.warning(f"⚠️ Rejected request: {e.data}")
            response = AdapterResponse(status=StatusCode.BAD_REQUEST, data=e.data)
        except DomainError as e:
            status = status_for(e)
            if status == StatusCode.INTERNAL_SERVER_ERROR:
                self.logger.error(f"❌ {e.message}", exc_info=True)
            else:
                self.logger.warning(f"⚠️ {e.message}")
            response = error_response(status, e.message)
        except Exception as e:
            self.logger.error(f"❌ Unexpected error: {str(e)}", exc_info=True)
            response = error_response(StatusCode.INTERNAL_SERVER_ERROR, "Internal server error")

        self.logger.info(f"End request: {int(response.status)}")
        return response

    @abstractmethod
    async def process(self, request: AdapterRequest) -> AdapterResponse:
        """Run the operation; may raise DomainError or RequestRejected."""
        pass

    # Request helpers

    @staticmethod
    def path_param(request: AdapterRequest, name: str) -> str:
        value = request.params.get(name)
        if not isinstance(value, str) or not value:
            raise RequestRejected({"error": f"Missing or invalid {name}"})
        return value

    @staticmethod
    def require_body(request: AdapterRequest) -> dict[str, Any]:
        if request.body is None:
            raise RequestRejected({"error": "Missing body"})
        if not isinstance(request.body, dict):
            raise RequestRejected({"error": "Body must be a JSON object"})
        return request.body

    @staticmethod
    def require_fields(body: dict[str, Any], required: tuple[str, ...]) -> None:
        missing = [name for name in required if body.get(name) is None]
        if missing:
            raise RequestRejected({"error": "Missing required fields", "fields": missing})

    @staticmethod
    def parse_body(model: type[ModelT], body: dict[str, Any]) -> ModelT:
        """Validate a creation body; type errors are listed in details."""
        try:
            return model.model_validate(body)
        except ValidationError as e:
            details = json.loads(e.json(include_url=False, include_input=False))
            raise RequestRejected({"error": "Invalid field types", "details": details}) from e

    @staticmethod
    def parse_patch(model: type[ModelT], body: dict[str, Any]) -> ModelT:
        """Validate a partial-update body; the first problem is reported."""
        try:
            return model.model_validate(body)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise RequestRejected({"error": f"Invalid body: {location}: {first['msg']}"}) from e

    @staticmethod
    def parse_query(model: type[ModelT], query: Optional[dict[str, Any]]) -> ModelT:
        try:
            return model.model_validate(query or {})
        except ValidationError as e:
            details = json.loads(e.json(include_url=False, include_input=False))
            raise RequestRejected({"error": "Invalid query parameters", "details": details}) from e
