"""Centralized exception handlers for FastAPI with RFC 7807 compliance.

Converts domain exceptions and request validation failures into RFC 7807
Problem Details so every endpoint reports errors with the same structure.
Validation failures (422) carry a per-field ``errors`` array that the admin
client maps onto form inputs.

RFC 7807 Reference: https://tools.ietf.org/html/rfc7807
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from catalogadmin.api.middleware.request_id import get_request_id
from catalogadmin.api.schemas.responses import (
    ERROR_TITLES,
    ErrorCode,
    FieldError,
    ProblemDetail,
    ProblemJSONResponse,
    ValidationProblemDetail,
    get_error_type_uri,
)
from catalogadmin.exceptions import APIError, APIValidationError, RepositoryError

logger = logging.getLogger(__name__)

MAX_DETAIL_LENGTH = 4096
"""Maximum allowed length for detail messages before truncation."""

TRUNCATION_SUFFIX = "... (truncated)"


# =============================================================================
# Helper Functions
# =============================================================================


def _truncate_detail(detail: str) -> str:
    """Truncate detail message if it exceeds maximum length."""
    if len(detail) <= MAX_DETAIL_LENGTH:
        return detail
    truncate_at = MAX_DETAIL_LENGTH - len(TRUNCATION_SUFFIX)
    return detail[:truncate_at] + TRUNCATION_SUFFIX


def _get_request_id_with_fallback(request: Request | None = None) -> str:
    """Get request ID from context variable with request.state fallback.

    Parameters
    ----------
    request : Request | None, optional
        The FastAPI request object for fallback (default: None).

    Returns
    -------
    str
        The request ID, or "-" if not available.
    """
    request_id = get_request_id()
    if request_id:
        return request_id

    if request is not None:
        state_request_id = getattr(request.state, "request_id", None)
        if state_request_id:
            return str(state_request_id)

    return "-"


def _safe_problem_response(
    code: ErrorCode,
    status: int,
    detail: str,
    instance: str,
    request: Request | None = None,
) -> ProblemJSONResponse:
    """Create a ProblemJSONResponse, falling back to a minimal body.

    If the problem cannot be serialized, a hardcoded 500 problem is
    returned so the client always receives a valid RFC 7807 document.
    """
    try:
        problem = ProblemDetail(
            type=get_error_type_uri(code),
            title=ERROR_TITLES.get(code, "Error"),
            status=status,
            detail=_truncate_detail(detail),
            instance=instance,
            code=code.value,
            request_id=_get_request_id_with_fallback(request),
        )
        return ProblemJSONResponse(content=problem.model_dump(), status_code=status)
    except Exception as e:
        logger.error("Error serializing error response: %s", e, exc_info=True)
        return ProblemJSONResponse(
            content={
                "type": get_error_type_uri(ErrorCode.INTERNAL_ERROR),
                "title": "Internal Server Error",
                "status": 500,
                "detail": "An unexpected error occurred",
                "instance": instance,
                "code": ErrorCode.INTERNAL_ERROR.value,
                "request_id": _get_request_id_with_fallback(request),
            },
            status_code=500,
        )


def _validation_problem_response(
    request: Request, errors: Iterable[dict[str, Any]]
) -> ProblemJSONResponse:
    """Render a 422 ValidationProblemDetail from pydantic-style error dicts."""
    field_errors = [
        FieldError(
            loc=[part for part in error.get("loc", []) if isinstance(part, (str, int))],
            msg=str(error.get("msg", "")),
            type=str(error.get("type", "")),
        )
        for error in errors
    ]
    validation_problem = ValidationProblemDetail(
        type=get_error_type_uri(ErrorCode.VALIDATION_ERROR),
        title=ERROR_TITLES[ErrorCode.VALIDATION_ERROR],
        status=422,
        detail="Request validation failed",
        instance=str(request.url.path),
        code=ErrorCode.VALIDATION_ERROR.value,
        request_id=_get_request_id_with_fallback(request),
        errors=field_errors,
    )
    return ProblemJSONResponse(content=validation_problem.model_dump(), status_code=422)


# =============================================================================
# Exception Handlers
# =============================================================================


async def api_error_handler(request: Request, exc: APIError) -> ProblemJSONResponse:
    """Handle APIError subclasses and convert to RFC 7807 Problem Detail.

    ``APIValidationError`` is rendered with its field errors, the same way
    pydantic request validation failures are.
    """
    if isinstance(exc, APIValidationError):
        logger.info("Validation rejected %s: %s", request.url.path, exc.errors)
        return _validation_problem_response(request, exc.errors)

    return _safe_problem_response(
        code=exc.error_code,
        status=exc.status_code,
        detail=exc.message,
        instance=str(request.url.path),
        request=request,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> ProblemJSONResponse:
    """Handle pydantic RequestValidationError and convert to RFC 7807 format.

    Keeps pydantic's error order and allows multiple errors per field.
    """
    try:
        return _validation_problem_response(request, exc.errors())
    except Exception as e:
        logger.error("Error serializing validation error response: %s", e, exc_info=True)
        return ProblemJSONResponse(
            content={
                "type": get_error_type_uri(ErrorCode.VALIDATION_ERROR),
                "title": "Validation Error",
                "status": 422,
                "detail": "Request validation failed",
                "instance": str(request.url.path),
                "code": ErrorCode.VALIDATION_ERROR.value,
                "request_id": _get_request_id_with_fallback(request),
                "errors": [],
            },
            status_code=422,
        )


async def repository_error_handler(
    request: Request, exc: RepositoryError
) -> ProblemJSONResponse:
    """Handle RepositoryError with a generic detail; the cause is logged."""
    logger.error(
        "Repository error: %s (operation=%s, entity=%s)",
        exc.message,
        exc.operation,
        exc.entity_type,
        exc_info=exc.original_error,
    )

    return _safe_problem_response(
        code=ErrorCode.DATABASE_ERROR,
        status=500,
        detail="A database error occurred",
        instance=str(request.url.path),
        request=request,
    )


async def generic_error_handler(
    request: Request, exc: Exception
) -> ProblemJSONResponse:
    """Catch-all for unhandled exceptions; internals are never exposed."""
    logger.exception("Unhandled exception: %s", exc)

    return _safe_problem_response(
        code=ErrorCode.INTERNAL_ERROR,
        status=500,
        detail="An unexpected error occurred",
        instance=str(request.url.path),
        request=request,
    )


# =============================================================================
# Handler Registration
# =============================================================================


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Parameters
    ----------
    app : FastAPI
        The FastAPI application instance.
    """
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RepositoryError, repository_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_error_handler)
