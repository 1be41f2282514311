"""Error Handlers - the single translator from failures to JSON error bodies.

Invariants:
    - Every failure is classified exactly once, most specific class first:
        1. structural validation  -> 400 {"<field>": "<message>", ...}
        2. malformed payload      -> 400 {"error": MALFORMED_JSON_MESSAGE}
        3. domain failure         -> variant status {"error": "<message>"}
        4. anything else          -> 500 {"error": "An unexpected error occurred: <message>"}
    - Framework HTTP errors (unknown route, wrong verb) keep their status, JSON body
    - Route handlers never catch domain errors themselves

Design Decisions:
    - Validation and malformed payloads both arrive as RequestValidationError;
      they are told apart by error type and location, not by separate exceptions
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_registry.core.domain_types import ErrorKind
from employee_registry.core.errors import EmployeeRegistryError

logger = logging.getLogger(__name__)

MALFORMED_JSON_MESSAGE = "Invalid JSON format. Please check your request body."
UNEXPECTED_ERROR_PREFIX = "An unexpected error occurred: "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register the structural-validation / malformed-payload handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = exc.errors()
        kind = classify_validation_errors(errors)
        logger.warning(
            f"{kind.value} on {request.method} {request.url.path}: {errors}",
            extra={
                "error_kind": kind.value,
                "path": request.url.path,
                "method": request.method,
            },
        )
        if kind is ErrorKind.MALFORMED_PAYLOAD:
            content: dict = {"error": MALFORMED_JSON_MESSAGE}
        else:
            content = build_field_errors(errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=content,
        )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register handler for deliberate service-level failures."""

    @app.exception_handler(EmployeeRegistryError)
    async def domain_error_handler(request: Request, exc: EmployeeRegistryError):
        logger.warning(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_kind": exc.kind.value,
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Render framework HTTP errors (404 route, 405 verb) as JSON."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={
                "error_kind": ErrorKind.UNEXPECTED.value,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": f"{UNEXPECTED_ERROR_PREFIX}{exc}"},
        )


def classify_validation_errors(errors: Sequence[dict[str, Any]]) -> ErrorKind:
    """Decide whether a RequestValidationError is a malformed payload or field-level.

    Malformed: the body is not parseable JSON, is missing, has the wrong
    container type (object vs array), or holds an element of the wrong type.
    Everything else is a field-level structural validation failure.
    """
    for error in errors:
        if error.get("type") == "json_invalid":
            return ErrorKind.MALFORMED_PAYLOAD
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] == "body" and (len(loc) == 1 or isinstance(loc[1], int)):
            return ErrorKind.MALFORMED_PAYLOAD
    return ErrorKind.VALIDATION


def build_field_errors(errors: Sequence[dict[str, Any]]) -> dict[str, str]:
    """Map each failing field (wire name) to its first validation message."""
    fields: dict[str, str] = {}
    for error in errors:
        loc = error.get("loc", ())
        field = str(loc[-1]) if loc else "request"
        fields.setdefault(field, _error_message(error))
    return fields


def _error_message(error: dict[str, Any]) -> str:
    """Prefer the validator's own message over pydantic's 'Value error, ...' wrapper."""
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error.get("msg", "Invalid value"))
