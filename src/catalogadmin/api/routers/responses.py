"""Shared OpenAPI response definitions for RFC 7807 compliance.

This module provides reusable response definitions for API endpoints that
follow RFC 7807 Problem Details specification. These definitions ensure
consistent error schema exposure in OpenAPI documentation.
"""

from __future__ import annotations

from typing import Any

from catalogadmin.api.schemas.responses import (
    ProblemDetail,
    ValidationProblemDetail,
)

# Standard error responses for OpenAPI documentation
PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

# Type alias for FastAPI responses parameter
ResponsesType = dict[int | str, dict[str, Any]]

# Common error responses
NOT_FOUND_RESPONSE: ResponsesType = {
    404: {
        "model": ProblemDetail,
        "description": "Resource not found",
        "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
    }
}

VALIDATION_ERROR_RESPONSE: ResponsesType = {
    422: {
        "model": ValidationProblemDetail,
        "description": "Validation error",
        "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
    }
}

INTERNAL_ERROR_RESPONSE: ResponsesType = {
    500: {
        "model": ProblemDetail,
        "description": "Internal server error",
        "content": {PROBLEM_JSON_MEDIA_TYPE: {}},
    }
}

# Combined response sets for common endpoint patterns

LIST_ERRORS: ResponsesType = {
    **VALIDATION_ERROR_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for GET list/collection endpoints (422, 500)."""

GET_ITEM_ERRORS: ResponsesType = {
    **NOT_FOUND_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for GET single item endpoints (404, 500)."""

CREATE_ERRORS: ResponsesType = {
    **VALIDATION_ERROR_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for POST create endpoints (422, 500)."""

UPDATE_ERRORS: ResponsesType = {
    **NOT_FOUND_RESPONSE,
    **VALIDATION_ERROR_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for PUT update endpoints (404, 422, 500)."""

DELETE_ERRORS: ResponsesType = {
    **NOT_FOUND_RESPONSE,
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for DELETE endpoints (404, 500)."""

# Health endpoint - only internal errors
HEALTH_ERRORS: ResponsesType = {
    **INTERNAL_ERROR_RESPONSE,
}
"""Errors for health endpoint (500 only)."""
