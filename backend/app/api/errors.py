"""
Translation of service errors into HTTP responses.

Every error body has the same shape:
    {timestamp, status, error, message, path}
"""
import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import (
    AccessDeniedError,
    ConflictError,
    FitnessTrackerError,
    InvalidOperationError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[FitnessTrackerError], int] = {
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: FitnessTrackerError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    request: Request,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": request.url.path,
    }
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FitnessTrackerError)
    async def handle_service_error(request: Request, exc: FitnessTrackerError) -> JSONResponse:
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error("Unhandled service error", extra={"path": request.url.path}, exc_info=exc)
        return error_response(request, status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(request, status.HTTP_400_BAD_REQUEST, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(request, exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(IntegrityError)
    async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity error", extra={"path": request.url.path, "error": str(exc.orig)})
        return error_response(request, status.HTTP_409_CONFLICT, "Conflicting data: a unique constraint was violated")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error", extra={"path": request.url.path})
        return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal server error")
