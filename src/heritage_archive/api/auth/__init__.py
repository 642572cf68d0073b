"""
Authentication module for the Heritage Archive API.

Provides JWT token generation/validation and the admin credential check.
"""

from heritage_archive.api.auth.credentials import verify_admin_credentials
from heritage_archive.api.auth.jwt import (
    ADMIN_SCOPE,
    DEFAULT_EXPIRATION_SECONDS,
    ExpiredTokenError,
    InvalidTokenError,
    TokenError,
    TokenPayload,
    create_access_token,
    decode_token,
    extract_token_from_header,
    validate_token,
)

__all__ = [
    "ADMIN_SCOPE",
    "DEFAULT_EXPIRATION_SECONDS",
    "create_access_token",
    "decode_token",
    "validate_token",
    "extract_token_from_header",
    "verify_admin_credentials",
    "TokenPayload",
    "TokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
]
