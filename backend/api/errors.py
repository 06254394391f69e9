"""
Exception handlers.

Translate domain exceptions, request-validation failures and unexpected
errors into ``{"message": ...}`` responses with the right status code.
Internal details (tracebacks, driver messages) are logged, never returned.
"""

import logging
from typing import Any
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import AuthenticationError, DonorHubError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def validation_message(errors: list[dict[str, Any]]) -> str:
    """Reduce pydantic errors to one client-facing sentence (the first error)."""
    if not errors:
        return "Invalid request"

    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    error_type = error.get("type", "")

    if error_type == "missing":
        return f"{field} is required" if field else "Request body is required"
    if error_type == "extra_forbidden":
        return f"Unknown field: {field}"

    # Messages raised by our own validators are already written for clients
    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, ValueError) and str(ctx_error):
        return str(ctx_error)

    if error_type == "json_invalid":
        return "Malformed JSON body"
    return f"Invalid {field}" if field else "Invalid request body"


async def donorhub_error_handler(request: Request, exc: DonorHubError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": validation_message(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = "Route not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on an application."""
    app.add_exception_handler(DonorHubError, donorhub_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
