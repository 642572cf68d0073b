"""
Authentication middleware.

Identifies the caller of each request from a JWT Bearer token in the
Authorization header. Enforcement happens per route through the
``require_admin`` dependency, so public gallery endpoints stay open.
"""

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from heritage_archive.api.auth import ADMIN_SCOPE, extract_token_from_header, validate_token
from heritage_archive.api.schemas.exceptions import AuthRequiredError

logger = logging.getLogger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request authentication.

    Sets ``request.state.user_id`` and ``request.state.scope`` from a valid
    Bearer token, or None for anonymous requests.
    """

    def __init__(self, app: ASGIApp, *, jwt_secret: str | None = None) -> None:
        """
        Initialize authentication middleware.

        Args:
            app: ASGI application
            jwt_secret: Token signing secret (uses HA_JWT_SECRET if not provided)
        """
        super().__init__(app)
        self._jwt_secret = jwt_secret

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        user_id, scope = self._authenticate(request)

        request.state.user_id = user_id
        request.state.scope = scope

        if user_id:
            logger.debug(f"Authenticated request from user: {user_id} on {request.url.path}")

        return await call_next(request)

    def _authenticate(self, request: Request) -> tuple[str | None, str | None]:
        """
        Attempt JWT authentication via Authorization header.

        Returns:
            Tuple of (user_id, scope), both None for anonymous requests
        """
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None, None

        token = extract_token_from_header(auth_header)
        if not token:
            return None, None

        is_valid, payload, error = validate_token(token, self._jwt_secret)
        if is_valid and payload:
            return payload.sub, payload.scope

        logger.debug(f"JWT validation failed: {error}")
        return None, None


async def get_optional_user_id(request: Request) -> str | None:
    """
    Get user ID from request state if present.

    Args:
        request: Current request

    Returns:
        User ID or None
    """
    return getattr(request.state, "user_id", None)


async def require_admin(request: Request) -> str:
    """
    Route dependency guarding administrator-only endpoints.

    Returns:
        Admin identity (or "anonymous" when auth is disabled)

    Raises:
        AuthRequiredError: If the request carries no valid admin token
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is not None and not settings.require_auth:
        return await get_optional_user_id(request) or "anonymous"

    user_id = await get_optional_user_id(request)
    scope = getattr(request.state, "scope", None)
    if not user_id or scope != ADMIN_SCOPE:
        raise AuthRequiredError(
            message="Authentication required for this endpoint",
            detail="Provide an admin token (Authorization: Bearer <token>) from /api/v1/auth/login",
        )
    return user_id
