"""Logging setup for the API process."""

import logging
import os
import sys
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

MAX_REQUEST_LOG_LENGTH = 80

request_logger = logging.getLogger("taskboard.requests")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure logging to stdout.

    Args:
        level: Logging level (default: INFO)
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("taskboard").setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def export_log_level(level: int | str) -> str:
    """Publish the level through LOG_LEVEL so reloaded worker processes use it.

    Returns:
        str: The level name written to the environment
    """
    name = level if isinstance(level, str) else logging.getLevelName(level)
    os.environ["LOG_LEVEL"] = name.upper()
    return name.upper()


def format_request_line(method: str, path: str, status_code: int, duration_ms: int) -> str:
    """Build the one-line summary logged for an API request."""
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if len(line) > MAX_REQUEST_LOG_LENGTH:
        line = line[: MAX_REQUEST_LOG_LENGTH - 1] + "…"
    return line


async def log_api_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """HTTP middleware logging method, path, status and duration of /api calls."""
    start = time.perf_counter()
    # Unhandled errors leave no response; they become a 500
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        path = request.url.path
        if path.startswith("/api"):
            duration_ms = int((time.perf_counter() - start) * 1000)
            request_logger.info(
                format_request_line(request.method, path, status_code, duration_ms)
            )
