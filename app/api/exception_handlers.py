"""Map service errors and request validation failures to HTTP responses.

Error response format:
    {"detail": "Human-readable error message"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    ConfigurationError,
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
    UserServiceError,
)

logger = logging.getLogger(__name__)

# Duplicate usernames are reported as a plain bad request.
ERROR_TO_STATUS: dict[type[UserServiceError], int] = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: UserServiceError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_TO_STATUS:
            return ERROR_TO_STATUS[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        # Server-side detail stays in the logs.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status_code,
            content={"detail": "Internal server error"},
        )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed path ids are unknown resources (404); anything else is a bad request."""
    errors = exc.errors()
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Not Found"},
        )
    logger.debug("Rejected request to %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in errors
        ]},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserServiceError, user_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
