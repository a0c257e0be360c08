"""Relay error types and their JSON responses.

Every failed request is answered with ``{"error": <text>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lexora.models.schemas import ErrorBody

logger = logging.getLogger(__name__)

MESSAGE_REQUIRED = "message is required"
GENERIC_SERVER_ERROR = "Internal server error"


class RelayError(Exception):
    """Base error carrying the HTTP status the relay answers with."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = GENERIC_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message


class MessageRequiredError(RelayError):
    """Raised when the request carries no usable message."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self) -> None:
        super().__init__(MESSAGE_REQUIRED)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(error=message).model_dump(),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Pick the text for a rejected body.

    Unparseable bodies and problems with ``message`` both read as a missing
    message; errors on other fields keep pydantic's wording.
    """
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != "body"]
        if loc and isinstance(loc[0], str) and loc[0] != "message":
            return f"{loc[0]}: {error.get('msg', 'invalid value')}"
    return MESSAGE_REQUIRED


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Attach the relay's JSON error handlers to an application."""
    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
