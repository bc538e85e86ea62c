"""Translation of domain errors into HTTP responses."""

import logging
from typing import assert_never

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from vagaflow.domain.common.exceptions import DomainError, ErrorKind

logger = logging.getLogger(__name__)


def status_for_kind(kind: ErrorKind) -> tuple[int, str]:
    """Map an error kind to an HTTP status code and error title."""
    match kind:
        case ErrorKind.VALIDATION:
            return status.HTTP_400_BAD_REQUEST, "Validation Error"
        case ErrorKind.UNAUTHORIZED:
            return status.HTTP_403_FORBIDDEN, "Forbidden"
        case ErrorKind.NOT_FOUND:
            return status.HTTP_404_NOT_FOUND, "Not Found"
        case ErrorKind.CONFLICT:
            return status.HTTP_409_CONFLICT, "Conflict"
        case _:
            assert_never(kind)


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a DomainError as {"error", "message"} with the status of its kind."""
    if not isinstance(exc, DomainError):
        return await unexpected_error_handler(request, exc)
    status_code, title = status_for_kind(exc.kind)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"error": title, "message": exc.message},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Hide internal failures behind a generic 500."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!s}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain and fallback error handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
