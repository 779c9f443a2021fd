"""
Error types and the terminal error handlers of the application.

Handlers and the store never build error responses themselves.  They
raise one of the exceptions below and the handlers registered by
``register_exception_handlers`` turn it into the uniform envelope::

    {"error": {"status": 404, "message": "User with ID 7 not found."}}

Framework errors (unknown routes, wrong methods, undecodable request
bodies) and unexpected exceptions go through the same envelope, so a
client never sees a non‑2xx response in another shape.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal Server Error"


class APIError(Exception):
    """Base class for errors that carry an HTTP status and a message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = DEFAULT_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class UserNotFoundError(NotFoundError):
    """Raised when no user has the requested identifier."""

    def __init__(self, user_id: Any) -> None:
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found.")


class ValidationError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"status": status_code, "message": message}},
        headers=headers,
    )


def _log_failure(request: Request, status_code: int, exc: BaseException) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "%s %s failed with status %s: %s",
        request.method,
        request.url.path,
        status_code,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    _log_failure(request, exc.status_code, exc)
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap routing errors (404 for unknown paths, 405 for wrong methods)."""
    _log_failure(request, exc.status_code, exc)
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else DEFAULT_ERROR_MESSAGE
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report an unreadable body as a client error.

    This covers malformed JSON and field values of the wrong type.
    Missing fields are not an error at this stage; presence checks
    happen in the route‑specific validation.
    """
    errors = exc.errors()
    reason = errors[0].get("msg", "malformed payload") if errors else "malformed payload"
    _log_failure(request, status.HTTP_400_BAD_REQUEST, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid request body: {reason}")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _log_failure(request, status.HTTP_500_INTERNAL_SERVER_ERROR, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, DEFAULT_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
