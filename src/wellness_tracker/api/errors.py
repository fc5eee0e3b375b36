"""Exception handlers mapping domain errors to JSON error responses.

Status code mapping:
- ``ValidationError`` -> 422 Unprocessable Entity
- ``EntryNotFoundError`` -> 404 Not Found
- ``BackendError`` -> 502 Bad Gateway
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wellness_tracker.api.models import ErrorDetail, ErrorResponse
from wellness_tracker.errors import BackendError, EntryNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return error_response(422, "VALIDATION_ERROR", str(exc))


async def _handle_not_found(request: Request, exc: EntryNotFoundError) -> JSONResponse:
    logger.info("Entry not found: %s", exc)
    return error_response(status.HTTP_404_NOT_FOUND, "ENTRY_NOT_FOUND", str(exc))


async def _handle_backend_error(request: Request, exc: BackendError) -> JSONResponse:
    """Return 502 when the data backend fails; details stay in the log."""
    logger.error(
        "Backend failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return error_response(
        status.HTTP_502_BAD_GATEWAY,
        "BACKEND_UNAVAILABLE",
        "The data backend is unavailable, please try again",
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain exception handlers to the application."""
    app.add_exception_handler(ValidationError, _handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(EntryNotFoundError, _handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(BackendError, _handle_backend_error)  # type: ignore[arg-type]
