"""Middleware components for the catalogadmin API."""

from catalogadmin.api.middleware.request_id import (
    RequestIdFilter,
    RequestIdMiddleware,
    get_request_id,
    request_id_var,
)

__all__ = [
    "RequestIdFilter",
    "RequestIdMiddleware",
    "get_request_id",
    "request_id_var",
]
