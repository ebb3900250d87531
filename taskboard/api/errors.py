"""Exception handlers shaping every error response as ``{"message", "errors"?}``."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.services.tasks import TaskStoreError

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce pydantic error entries to field-level detail safe for clients."""
    errors = []
    for error in exc.errors():
        # First element of loc is the request part ("body", "path", ...)
        loc = [str(part) for part in error.get("loc", ())[1:]]
        errors.append(
            {
                "field": ".".join(loc),
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )
    return errors


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    if any(error.get("loc", ("",))[0] == "path" for error in exc.errors()):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid task ID"},
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid task data", "errors": _field_errors(exc)},
    )


async def store_exception_handler(request: Request, exc: TaskStoreError) -> JSONResponse:
    # Details were logged where the failure happened
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        extra={"method": request.method, "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(TaskStoreError, store_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
