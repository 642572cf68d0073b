"""
Request logging middleware.

Logs every HTTP request with timing information and tags responses
with a request id.
"""

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def client_ip(request: Request) -> str:
    """Client address, honoring proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, client, status code and duration per request.

    Adds ``X-Request-ID`` (echoed or generated) and ``X-Process-Time``
    (milliseconds) response headers.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        logger_instance: logging.Logger | None = None,
        skip_prefixes: tuple[str, ...] = ("/health",),
    ) -> None:
        super().__init__(app)
        self._logger = logger_instance or logger
        self._skip_prefixes = skip_prefixes

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path.startswith(self._skip_prefixes):
            return await call_next(request)

        start_time = time.time()
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        context = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_ip(request),
            "request_id": request_id,
        }

        self._logger.info("Request started", extra={"event": "request_started", **context})

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self._logger.error(
                "Request failed",
                extra={
                    "event": "request_failed",
                    **context,
                    "error": str(e),
                    "duration_ms": round(duration_ms, 2),
                },
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        self._logger.info(
            "Request completed",
            extra={
                "event": "request_completed",
                **context,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        response.headers["X-Request-ID"] = request_id
        return response
