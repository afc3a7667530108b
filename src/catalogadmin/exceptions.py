"""
Custom exceptions for the catalogadmin application.

This module defines domain-specific exceptions for error handling
throughout the application: API layer errors rendered as RFC 7807
problems, repository failures, and the errors raised by the admin client.
"""

from __future__ import annotations

from typing import Any

from catalogadmin.api.schemas.responses import ErrorCode


class CatalogAdminError(Exception):
    """Base exception for all catalogadmin errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize CatalogAdminError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class RepositoryError(CatalogAdminError):
    """
    Exception raised for repository/database operation failures.

    This exception wraps database-related errors such as connection
    failures, constraint violations, and query errors.

    Attributes
    ----------
    message : str
        Human-readable error message.
    operation : str | None
        The database operation that failed (e.g., "insert", "update", "delete").
    entity_type : str | None
        The type of entity involved (e.g., "Video", "Genre").
    original_error : Exception | None
        The original database exception that caused this error.

    Examples
    --------
    >>> try:
    ...     await genre_repository.create(session, obj_in=genre_create)
    ... except RepositoryError as e:
    ...     print(f"Failed to {e.operation} {e.entity_type}: {e.message}")
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: str | None = None,
        entity_type: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize RepositoryError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Repository operation failed").
        operation : str | None, optional
            The database operation that failed (default: None).
        entity_type : str | None, optional
            The type of entity involved (default: None).
        original_error : Exception | None, optional
            The original database exception (default: None).
        """
        self.operation: str | None = operation
        self.entity_type: str | None = entity_type
        self.original_error: Exception | None = original_error
        super().__init__(message)


# =============================================================================
# API Layer Exceptions
# =============================================================================


class APIError(CatalogAdminError):
    """Base exception for API layer errors.

    This exception provides a standardized way to return HTTP errors from
    the API layer with machine-readable error codes and detailed context.

    Attributes
    ----------
    status_code : int
        HTTP status code for the error response (default: 500).
    error_code : ErrorCode
        Machine-readable error code for API consumers.
    message : str
        Human-readable error message.
    details : dict[str, Any] | None
        Additional error context (e.g., resource_type, identifier).
    """

    status_code: int = 500
    _error_code_value: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize APIError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        details : dict[str, Any] | None, optional
            Additional error context (default: None).
        """
        self.message = message
        self.details = details
        super().__init__(message)

    @property
    def error_code(self) -> ErrorCode:
        """Get the error code as an ErrorCode enum."""
        return ErrorCode(self._error_code_value)


class NotFoundError(APIError):
    """Resource not found (404).

    Examples
    --------
    >>> raise NotFoundError(resource_type="Genre", identifier="0b6c...")
    """

    status_code: int = 404
    _error_code_value: str = "NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        identifier: str,
        hint: str | None = None,
    ) -> None:
        """
        Initialize NotFoundError.

        Parameters
        ----------
        resource_type : str
            The type of resource that was not found (e.g., "Category", "Video").
        identifier : str
            The identifier used to look up the resource.
        hint : str | None, optional
            Additional hint for the user (default: None).
        """
        self.resource_type = resource_type
        self.identifier = identifier
        message = f"{resource_type} '{identifier}' not found"
        if hint:
            message += f". {hint}"
        super().__init__(
            message=message,
            details={"resource_type": resource_type, "identifier": identifier},
        )


class APIValidationError(APIError):
    """Request validation failed (422).

    Raised when validation that pydantic cannot express fails, such as
    relation ids that do not exist. Each entry of ``errors`` mirrors a
    pydantic error: ``{"loc": [...], "msg": str, "type": str}``.

    Examples
    --------
    >>> raise APIValidationError.for_fields(
    ...     {"categories_id": "Unknown category id(s): 42"}
    ... )
    """

    status_code: int = 422
    _error_code_value: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Request validation failed",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors: list[dict[str, Any]] = errors or []
        super().__init__(message=message, details={"errors": self.errors})

    @classmethod
    def for_fields(
        cls, messages: dict[str, str], error_type: str = "value_error"
    ) -> "APIValidationError":
        """Build an error with one body-field entry per ``messages`` item."""
        return cls(
            errors=[
                {"loc": ["body", field], "msg": msg, "type": error_type}
                for field, msg in messages.items()
            ]
        )


# =============================================================================
# Admin Client Exceptions
# =============================================================================


class ClientError(CatalogAdminError):
    """Base exception for failures talking to the catalog API."""


class RequestCancelledError(ClientError):
    """
    A list request was superseded by a newer one for the same resource.

    Callers treat this as a silent no-op.
    """

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"Request to '{resource}' was cancelled")


class NetworkError(ClientError):
    """
    Exception raised for network-related failures.

    Attributes
    ----------
    message : str
        Human-readable error message.
    original_error : Exception | None
        The original exception that caused this error.
    """

    def __init__(
        self,
        message: str = "Network error occurred",
        original_error: Exception | None = None,
    ) -> None:
        self.original_error = original_error
        super().__init__(message)


class ApiResponseError(ClientError):
    """
    The API answered with an error status.

    Attributes
    ----------
    status_code : int
        HTTP status of the response.
    problem : dict[str, Any]
        Decoded RFC 7807 body (empty when the body is not JSON).
    """

    def __init__(self, status_code: int, problem: dict[str, Any] | None = None) -> None:
        self.status_code = status_code
        self.problem: dict[str, Any] = problem or {}
        detail = self.problem.get("detail") or "Request failed"
        super().__init__(f"{status_code}: {detail}")


class FormValidationError(ApiResponseError):
    """
    The API rejected a payload with a 422.

    ``field_errors`` maps each field name to its messages, ready to be shown
    next to the matching form input.
    """

    def __init__(self, problem: dict[str, Any]) -> None:
        super().__init__(422, problem)
        self.field_errors: dict[str, list[str]] = field_errors_from_problem(problem)


def field_errors_from_problem(problem: dict[str, Any]) -> dict[str, list[str]]:
    """
    Group the ``errors`` array of a validation problem by field.

    The field is the last string segment of each error's ``loc``; errors
    without one are grouped under ``"__all__"``.

    Parameters
    ----------
    problem : dict[str, Any]
        RFC 7807 validation problem body.

    Returns
    -------
    dict[str, list[str]]
        Messages keyed by field name, in the order received.
    """
    grouped: dict[str, list[str]] = {}
    for error in problem.get("errors") or []:
        loc = [part for part in error.get("loc", []) if isinstance(part, str)]
        field = loc[-1] if loc and loc[-1] not in ("body", "query") else "__all__"
        grouped.setdefault(field, []).append(str(error.get("msg", "")))
    return grouped


# Exit codes for CLI integration
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_ARGS = 2
EXIT_CODE_API_UNAVAILABLE = 3
