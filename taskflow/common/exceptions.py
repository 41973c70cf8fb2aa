from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskflow.common.current_datetime import get_current_datetime
from taskflow.common.schemas import FieldViolation

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TASK = "Task"
    USER = "User"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: Any, field: str = "id"
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"{self.resource_type} not found with {field}: {identifier}")


class ResourceAlreadyExistsException(Exception):
    def __init__(self, resource_type: ResourceType, identifier: Any):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"{self.resource_type} '{identifier}' already exists")


class ValidationException(Exception):
    def __init__(self, violations: list[FieldViolation]):
        self.violations = violations
        fields = ", ".join(violation.field for violation in violations)
        super().__init__(f"Validation failed for: {fields}")

    def as_dict(self) -> dict[str, str]:
        return {violation.field: violation.message for violation in self.violations}


def _error_body(status_code: int, message: str) -> dict[str, Any]:
    return {
        "timestamp": get_current_datetime().isoformat(),
        "status": status_code,
        "message": message,
    }


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(status.HTTP_404_NOT_FOUND, str(exc)),
    )


def resource_already_exists_handler(
    request: Request, exc: ResourceAlreadyExistsException
):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body(status.HTTP_409_CONFLICT, str(exc)),
    )


def validation_exception_handler(request: Request, exc: ValidationException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.as_dict(),
    )


def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    def loc_to_field(loc: tuple[Any, ...]) -> str:
        """Drop the request part ('body', 'query', 'path') and dot-join the rest"""
        parts = [str(x) for x in loc[1:]] or [str(x) for x in loc]
        return ".".join(parts)

    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(loc_to_field(tuple(error["loc"])), error["msg"])

    logger.error(f"Request validation failed: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=errors,
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred"},
    )


def datastore_connection_exception_handler(request: Request, exc: Exception):
    logger.error(f"Failed to connect to the datastore: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service unavailable"},
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(
    resource_type: ResourceType,
) -> ResponseDict:
    return {
        404: {
            "description": f"{resource_type.value} not found",
            "content": {
                "application/json": {
                    "example": {
                        "timestamp": "2024-01-01T12:00:00+00:00",
                        "status": 404,
                        "message": f"{resource_type.value} not found with id: 1",
                    }
                }
            },
        }
    }


def resource_already_exists_response(
    resource_type: ResourceType,
) -> ResponseDict:
    return {
        409: {
            "description": f"{resource_type.value} already exists",
            "content": {
                "application/json": {
                    "example": {
                        "timestamp": "2024-01-01T12:00:00+00:00",
                        "status": 409,
                        "message": f"{resource_type.value} 'example' already exists",
                    }
                }
            },
        }
    }


service_unavailable_response: ResponseDict = {
    503: {
        "description": "Service unavailable",
        "content": {"application/json": {"example": {"detail": "Service unavailable"}}},
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {"example": {"detail": "An unexpected error occurred"}}
        },
    }
}

validation_error_response: ResponseDict = {
    400: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "title": "Title must be between 3 and 100 characters",
                }
            }
        },
    }
}
