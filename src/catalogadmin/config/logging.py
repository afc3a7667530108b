"""
Logging setup for the API server and the CLI.

Installs a single stream handler on the ``catalogadmin`` logger whose format
carries the current request ID, supplied by ``RequestIdFilter``.
"""

from __future__ import annotations

import logging

from catalogadmin.api.middleware.request_id import RequestIdFilter
from catalogadmin.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

_HANDLER_NAME = "catalogadmin"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it more than once replaces the previously installed handler
    instead of stacking a new one.

    Parameters
    ----------
    level : str | None, optional
        Log level name; defaults to ``settings.log_level``.

    Returns
    -------
    logging.Logger
        The configured ``catalogadmin`` logger.
    """
    logger = logging.getLogger("catalogadmin")
    logger.setLevel((level or settings.log_level).upper())

    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
