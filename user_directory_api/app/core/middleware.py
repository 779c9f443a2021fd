"""
Request/response logging middleware.

``RequestLoggingMiddleware`` is a plain ASGI middleware.  It logs a
line when a request arrives and wraps the ``send`` callable so that a
second line, carrying the final status code, is logged right before
the response headers go out.  It never touches the response itself.
"""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send


logger = logging.getLogger(__name__)


def request_target(scope: Scope) -> str:
    """Return the request path with its query string, if any."""
    path = scope.get("path", "")
    query = scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


class RequestLoggingMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        target = request_target(scope)
        logger.info("Incoming Request: %s %s", method, target)
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                logger.info("Response Sent: %s %s -> Status %s", method, target, message["status"])
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            # The server error handler sits outside this middleware and
            # will answer with 500.
            if not response_started:
                logger.info("Response Sent: %s %s -> Status %s", method, target, 500)
            raise
