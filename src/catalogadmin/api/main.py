"""FastAPI application for the catalogadmin API."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from catalogadmin import __version__
from catalogadmin.api.exception_handlers import register_exception_handlers
from catalogadmin.api.middleware.request_id import RequestIdMiddleware
from catalogadmin.api.routers import cast_members, categories, genres, health, videos
from catalogadmin.config.database import db_manager
from catalogadmin.config.logging import configure_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Startup
    configure_logging()
    logger.info("catalogadmin API %s starting", __version__)
    yield
    # Shutdown
    await db_manager.close()


app = FastAPI(
    title="Catalog Admin API",
    description="CRUD API for the categories, genres, cast members and videos of a video catalog",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)


def _get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxied requests."""
    # Check for forwarded headers (common with reverse proxies)
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        # Take the first IP in the chain (original client)
        return forwarded_for.split(",")[0].strip()

    if request.client:
        return request.client.host
    return "unknown"


@app.middleware("http")
async def log_requests(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """
    Middleware to log incoming requests and outgoing responses.

    Logs request method, path, and client IP at INFO level.
    Logs response status code and timing with appropriate log level:
    - INFO for 2xx/3xx responses
    - WARNING for 4xx responses
    - ERROR for 5xx responses
    """
    start_time = time.perf_counter()

    method = request.method
    path = request.url.path
    logger.info("Request: %s %s from %s", method, path, _get_client_ip(request))

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    status_code = response.status_code

    if status_code >= 500:
        log_level = logging.ERROR
    elif status_code >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logger.log(
        log_level,
        "Response: %s %s - %d (%.3fs)",
        method,
        path,
        status_code,
        duration,
    )

    return response


# Outermost middleware, so request logs carry the id
app.add_middleware(RequestIdMiddleware)

# Mount routers under /api/v1 prefix
app.include_router(health.router, prefix=API_PREFIX, tags=["health"])
app.include_router(categories.router, prefix=API_PREFIX, tags=["categories"])
app.include_router(genres.router, prefix=API_PREFIX, tags=["genres"])
app.include_router(cast_members.router, prefix=API_PREFIX, tags=["cast-members"])
app.include_router(videos.router, prefix=API_PREFIX, tags=["videos"])
