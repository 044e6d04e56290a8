"""
Exception handlers shaping error responses.

  - request validation -> 400 with a readable message (FastAPI's default is 422)
  - anything unhandled -> 500; the stack trace is included only in development
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tripbook.core.config import get_settings
from tripbook.core.logging import get_logger

logger = get_logger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def describe_validation_error(error: dict) -> str:
    parts = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
    field = ".".join(parts) or "request body"
    if error.get("type") == "missing":
        return f"{field} is required"
    return f"Invalid {field}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = describe_validation_error(errors[0]) if errors else "Invalid request"
    logger.info("request_invalid", reason=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error=str(exc), error_type=type(exc).__name__)
    content = {"detail": "Internal server error", "message": str(exc)}
    if get_settings().ENVIRONMENT == "development":
        content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
