"""
Unified error handling utilities for the job board ranking service.

This module provides the application exception hierarchy and the FastAPI
exception handlers that turn every failure into the standard
``{success: false, message}`` payload.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.core.constants import ErrorCodes, ErrorMessages, HTTPStatusMessages
from jobboard.utils.logger import get_logger
from jobboard.utils.responses import APIResponse

logger = get_logger(__name__)


class BaseApplicationError(Exception):
    """
    Base exception class for all application-specific errors.

    Carries a client-facing message, a standardized error code, the HTTP
    status the error maps to, and optional details for debugging.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_code: str = ErrorCodes.SYSTEM_INTERNAL_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.error_code = error_code or self.default_error_code
        self.message = message or ErrorMessages.get_message(self.error_code)
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        self.timestamp = datetime.now(timezone.utc)

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format for logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }


class BadRequestError(BaseApplicationError):
    """Missing or malformed client input; raised before any query runs."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_error_code = ErrorCodes.VALIDATION_INVALID_FORMAT

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", None) or {}
        if field_name:
            details["field_name"] = field_name
        super().__init__(message=message, details=details, **kwargs)
        self.field_name = field_name


class NotFoundError(BaseApplicationError):
    """A referenced entity (candidate, job, company) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_error_code = ErrorCodes.RESOURCE_NOT_FOUND


class AuthenticationError(BaseApplicationError):
    """Bearer token missing, invalid or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_error_code = ErrorCodes.AUTH_TOKEN_INVALID


async def application_error_handler(request: Request, exc: BaseApplicationError) -> JSONResponse:
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "Request failed",
        method=request.method,
        path=request.url.path,
        **exc.to_dict(),
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=APIResponse.error(message=exc.message, error_code=exc.error_code),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or None
    message = (
        f"Invalid value for '{field}': {first.get('msg')}"
        if field
        else HTTPStatusMessages.BAD_REQUEST_400
    )
    logger.warning(
        "Request validation failed",
        method=request.method,
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=APIResponse.error(
            message=message, error_code=ErrorCodes.VALIDATION_INVALID_FORMAT
        ),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=APIResponse.error(message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        query_params=dict(request.query_params),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=APIResponse.error(
            message=HTTPStatusMessages.INTERNAL_ERROR_500,
            error_code=ErrorCodes.SYSTEM_INTERNAL_ERROR,
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
