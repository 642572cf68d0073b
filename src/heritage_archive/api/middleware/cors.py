"""
CORS (Cross-Origin Resource Sharing) middleware configuration.

The gallery front end is served from a different origin than the API,
so browser requests need CORS headers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

ALLOW_METHODS: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

ALLOW_HEADERS: list[str] = [
    "accept",
    "accept-language",
    "content-language",
    "content-type",
    "authorization",
    "x-request-id",
]


def add_cors_middleware(
    app: FastAPI,
    *,
    allow_origins: list[str],
    max_age: int = 600,
) -> None:
    """
    Add CORS middleware to the FastAPI application.

    Args:
        app: FastAPI application instance
        allow_origins: Allowed origins (``["*"]`` for any)
        max_age: Cache time for preflight requests (seconds)
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=False,
        allow_methods=ALLOW_METHODS,
        allow_headers=ALLOW_HEADERS,
        expose_headers=["X-Request-ID", "X-Process-Time"],
        max_age=max_age,
    )
