"""Translate domain exceptions into the JSON error envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.application.schemas.common import ErrorResponse
from app.domain.exceptions import DomainError, EntityNotFoundError, TransactionFailureError

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers mapping DomainError subclasses to HTTP status codes."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        if isinstance(exc, EntityNotFoundError):
            return _envelope(status.HTTP_404_NOT_FOUND, exc.message)
        if isinstance(exc, TransactionFailureError):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
            return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, exc.detail)
        return _envelope(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else "Invalid request"
        return _envelope(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc))
