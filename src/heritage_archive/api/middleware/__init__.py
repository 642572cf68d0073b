"""
Middleware for the Heritage Archive API.

This module contains all middleware components for request/response processing.
"""

from heritage_archive.api.middleware.auth import (
    AuthMiddleware,
    get_optional_user_id,
    require_admin,
)
from heritage_archive.api.middleware.cors import add_cors_middleware
from heritage_archive.api.middleware.logging import RequestLoggingMiddleware, client_ip

__all__ = [
    "AuthMiddleware",
    "get_optional_user_id",
    "require_admin",
    "add_cors_middleware",
    "RequestLoggingMiddleware",
    "client_ip",
]
