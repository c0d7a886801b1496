"""Exception handlers mapping errors to problem-details responses.

Every error body is `application/problem+json`:

    {"status": 404, "title": "Not Found", "detail": "...", "errors": {...}}

`errors` is only present for validation failures and maps a camelCase
field path to its messages.
"""

from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from brainshelf.domain.error import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)

PROBLEM_JSON = "application/problem+json"

# Leading loc segments naming where a FastAPI parameter came from
_PARAMETER_SOURCES = {"body", "query", "path", "header", "cookie"}


def problem_response(
    status_code: int,
    title: str,
    detail: str,
    errors: dict[str, list[str]] | None = None,
) -> JSONResponse:
    """Build a problem-details response."""
    content: dict[str, Any] = {
        "status": status_code,
        "title": title,
        "detail": detail,
    }
    if errors:
        content["errors"] = errors
    return JSONResponse(content, status_code=status_code, media_type=PROBLEM_JSON)


def field_path(loc: Sequence[int | str]) -> str:
    """Render a pydantic error location as a camelCase dotted path.

    Examples:
        ("body", "project_id") -> "projectId"
        ("query", "pageSize") -> "pageSize"
        ("body", "tags", 2) -> "tags.2"
    """
    parts = list(loc)
    if parts and parts[0] in _PARAMETER_SOURCES:
        parts = parts[1:]
    rendered = [
        to_camel(part) if isinstance(part, str) else str(part) for part in parts
    ]
    return ".".join(rendered) or "request"


def error_map(errors: Sequence[Any]) -> dict[str, list[str]]:
    """Group pydantic error messages by field path."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        message = error["msg"].removeprefix("Value error, ")
        grouped.setdefault(field_path(error.get("loc", ())), []).append(message)
    return grouped


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.info("Resource not found", resource=exc.resource, id=exc.identifier)
    return problem_response(status.HTTP_404_NOT_FOUND, "Not Found", str(exc))


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logfire.warn("Conflict", error=str(exc), path=request.url.path)
    return problem_response(status.HTTP_409_CONFLICT, "Conflict", str(exc))


async def invalid_operation_handler(
    request: Request, exc: InvalidOperationError
) -> JSONResponse:
    logfire.warn("Invalid operation", error=str(exc), path=request.url.path)
    return problem_response(status.HTTP_400_BAD_REQUEST, "Invalid Operation", str(exc))


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return problem_response(
        status.HTTP_400_BAD_REQUEST, "Validation Error", str(exc), exc.errors
    )


async def pydantic_validation_handler(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        "One or more validation errors occurred",
        error_map(exc.errors()),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = error_map(exc.errors())
    logfire.info("Request rejected", path=request.url.path, fields=sorted(errors))
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation Error",
        "One or more validation errors occurred",
        errors,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = problem_response(exc.status_code, _reason(exc.status_code), detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return problem_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred",
    )


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the app."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(InvalidOperationError, invalid_operation_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(pydantic.ValidationError, pydantic_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
