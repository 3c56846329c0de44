"""Render exceptions as JSON:API error documents."""

from __future__ import annotations

import logging
from typing import Any

from starlette.responses import JSONResponse

from jsonapi_serializer.core.errors import JSONAPIErrorBuilder
from jsonapi_serializer.core.exceptions import (
    JSONAPIError,
    MissingIdentifierError,
    UnregisteredModelError,
)

log = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

STATUS_CODES: dict[type[Exception], int] = {
    MissingIdentifierError: 400,
    UnregisteredModelError: 500,
}


class ErrorHandlerMiddleware:
    """Convert exceptions raised by the wrapped ASGI app into JSON:API errors."""

    def __init__(self, app: Any, *, status_codes: dict[type[Exception], int] | None = None) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.status_codes = {**STATUS_CODES, **(status_codes or {})}

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                log.exception("Error after the response started for %s", scope.get("path"))
                raise
            status_code = self.status_code_for(exc)
            if isinstance(exc, JSONAPIError) and status_code < 500:
                log.warning("%s: %s", type(exc).__name__, exc)
            else:
                log.exception("Unhandled error while serving %s", scope.get("path"))
            error = JSONAPIErrorBuilder().from_error(exc)
            error["status"] = str(status_code)
            response = JSONResponse(
                {"errors": [error]},
                status_code=status_code,
                media_type=JSONAPI_MEDIA_TYPE,
            )
            await response(scope, receive, send)

    def status_code_for(self, exc: Exception) -> int:
        """Return the HTTP status for an exception, 500 when unknown."""
        for klass in type(exc).__mro__:
            if klass in self.status_codes:
                return self.status_codes[klass]
        status = getattr(exc, "status", None)
        try:
            return int(status) if status is not None else 500
        except (TypeError, ValueError):
            return 500
