"""Request ID middleware for request correlation.

The middleware reads ``X-Request-ID`` from the incoming request, or makes a
new UUID v4 when it is missing or unusable, and exposes it through a
context variable so log records and error bodies can carry it without
passing the request around. The same value is echoed in the response.
"""

from __future__ import annotations

import contextvars
import logging
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint

logger = logging.getLogger(__name__)

MAX_REQUEST_ID_LENGTH = 128

REQUEST_ID_HEADER = "X-Request-ID"

# Empty string means no request is being processed
request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "request_id", default=""
)


def get_request_id() -> str:
    """Return the current request ID, or an empty string outside a request."""
    return request_id_var.get()


def _sanitize_request_id(header_value: str | None) -> str:
    """Validate a client supplied request ID.

    Missing values and values with characters outside printable ASCII
    (33-126) are replaced by a fresh UUID; values longer than
    ``MAX_REQUEST_ID_LENGTH`` are cut down, keeping their prefix.

    Parameters
    ----------
    header_value : str | None
        The raw X-Request-ID header value.

    Returns
    -------
    str
        The request ID to use for this request.
    """
    if not header_value:
        return str(uuid.uuid4())

    if not all(33 <= ord(c) <= 126 for c in header_value):
        logger.warning(
            "X-Request-ID contains non-ASCII-printable characters, generating new ID"
        )
        return str(uuid.uuid4())

    return header_value[:MAX_REQUEST_ID_LENGTH]


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propagate a request ID through context, ``request.state`` and headers.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> app.add_middleware(RequestIdMiddleware)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = _sanitize_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(request_id)

        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)


class RequestIdFilter(logging.Filter):
    """Logging filter that adds ``request_id`` to every record.

    Records emitted outside a request get ``"-"``, so format strings can
    always reference ``%(request_id)s``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True
