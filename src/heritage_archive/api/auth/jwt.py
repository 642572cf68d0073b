"""
Admin session tokens.

The admin panel authenticates with a compact HS256 JWT signed with
``HA_JWT_SECRET``. Tokens carry the admin's email as ``sub`` and the
``admin`` scope; there is no refresh flow, the panel logs in again once
a token expires.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import secrets
import time
from dataclasses import asdict, dataclass
from typing import Any

from heritage_archive.core.exceptions import HeritageArchiveError

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_SECONDS = 24 * 60 * 60
JWT_ALGORITHM = "HS256"
ADMIN_SCOPE = "admin"

_process_secret: str | None = None
_HEADER = {"alg": JWT_ALGORITHM, "typ": "JWT"}


class TokenError(HeritageArchiveError):
    """A bearer token could not be accepted."""


class InvalidTokenError(TokenError):
    """Malformed token, bad signature or missing claims."""


class ExpiredTokenError(TokenError):
    """Token is past its ``exp`` claim."""


@dataclass
class TokenPayload:
    """Claims carried by an admin token."""

    sub: str
    exp: int
    iat: int
    scope: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TokenPayload":
        return cls(
            sub=str(data["sub"]),
            exp=int(data["exp"]),
            iat=int(data.get("iat", 0)),
            scope=data.get("scope"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @property
    def is_admin(self) -> bool:
        return self.scope == ADMIN_SCOPE


def get_jwt_secret() -> str:
    """
    Signing secret from ``HA_JWT_SECRET``.

    Without it, a random secret is generated once per process: tokens then
    verify only in the process that issued them and stop working on restart.
    """
    secret = os.getenv("HA_JWT_SECRET", "")
    if secret:
        return secret

    global _process_secret
    if _process_secret is None:
        logger.warning("HA_JWT_SECRET is not set; signing admin tokens with a random per-process secret")
        _process_secret = secrets.token_urlsafe(32)
    return _process_secret


def _encode_segment(data: dict[str, Any]) -> str:
    raw = json.dumps(data, separators=(",", ":"), sort_keys=True).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode_segment(segment: str) -> dict[str, Any]:
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))


def _signature(signing_input: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha256)
    return base64.urlsafe_b64encode(digest.digest()).rstrip(b"=").decode("ascii")


def create_access_token(
    subject: str,
    expiration_seconds: int = DEFAULT_EXPIRATION_SECONDS,
    scope: str | None = None,
    secret: str | None = None,
) -> str:
    """
    Issue a signed token for ``subject``.

    Args:
        subject: Identity placed in the ``sub`` claim (the admin email)
        expiration_seconds: Token lifetime in seconds
        scope: Optional scope claim, ``admin`` for the admin panel
        secret: Signing secret (defaults to ``HA_JWT_SECRET``)

    Raises:
        ValueError: If subject is empty
    """
    if not subject:
        raise ValueError("Subject cannot be empty")

    now = int(time.time())
    payload = TokenPayload(sub=subject, exp=now + expiration_seconds, iat=now, scope=scope)

    signing_input = f"{_encode_segment(_HEADER)}.{_encode_segment(payload.to_dict())}"
    signature = _signature(signing_input, secret or get_jwt_secret())

    logger.debug(f"Issued token for {subject}, expires at {payload.exp}")
    return f"{signing_input}.{signature}"


def decode_token(token: str, secret: str | None = None) -> TokenPayload:
    """
    Verify a token and return its claims.

    Raises:
        InvalidTokenError: If the token is malformed, unsigned by ``secret``
            or missing ``sub`` / ``exp``
        ExpiredTokenError: If the token has expired
    """
    parts = token.split(".") if token else []
    if len(parts) != 3:
        raise InvalidTokenError("Invalid token format")

    header_segment, payload_segment, signature = parts
    expected = _signature(f"{header_segment}.{payload_segment}", secret or get_jwt_secret())
    if not hmac.compare_digest(expected, signature):
        raise InvalidTokenError("Invalid token signature")

    try:
        header = _decode_segment(header_segment)
        claims = _decode_segment(payload_segment)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidTokenError(f"Cannot decode token: {e}") from e

    if header.get("alg") != JWT_ALGORITHM:
        raise InvalidTokenError(f"Unsupported token algorithm: {header.get('alg')}")
    if "sub" not in claims or "exp" not in claims:
        raise InvalidTokenError("Token missing required claims")

    payload = TokenPayload.from_dict(claims)
    if int(time.time()) >= payload.exp:
        raise ExpiredTokenError(f"Token expired at {payload.exp}")
    return payload


def validate_token(
    token: str, secret: str | None = None
) -> tuple[bool, TokenPayload | None, str | None]:
    """Non-raising :func:`decode_token`: ``(is_valid, payload, error_message)``."""
    try:
        return True, decode_token(token, secret), None
    except TokenError as e:
        return False, None, e.message


def extract_token_from_header(auth_header: str) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    scheme, _, token = (auth_header or "").strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip() or " " in token.strip():
        return None
    return token.strip()
