"""
Authentication routes for the Heritage Archive API.

The admin panel logs in with the configured administrator credential
and receives a Bearer token for the artifact management endpoints.
"""

import logging

from fastapi import APIRouter, Request

from heritage_archive.api.auth import ADMIN_SCOPE, create_access_token, verify_admin_credentials
from heritage_archive.api.middleware.auth import get_optional_user_id
from heritage_archive.api.schemas.exceptions import InvalidCredentialsError
from heritage_archive.api.schemas.requests import LoginRequest
from heritage_archive.api.schemas.responses import CurrentUserResponse, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, request: Request) -> TokenResponse:
    """
    Exchange the administrator credential for an access token.

    Raises:
        InvalidCredentialsError: If the email or password is wrong
    """
    settings = request.app.state.settings

    if not verify_admin_credentials(body.email, body.password, settings):
        logger.warning(f"Failed admin login for {body.email}")
        raise InvalidCredentialsError()

    expiration_seconds = int(settings.token_expiration_hours * 3600)
    token = create_access_token(
        subject=body.email.strip().lower(),
        expiration_seconds=expiration_seconds,
        scope=ADMIN_SCOPE,
        secret=settings.jwt_secret,
    )

    logger.info(f"Issued admin token for {body.email}")
    return TokenResponse(
        access_token=token,
        expires_in=expiration_seconds,
        user_id=body.email.strip().lower(),
    )


@router.get("/me", response_model=CurrentUserResponse)
async def current_user(request: Request) -> CurrentUserResponse:
    """Report who the request's token identifies, if anyone."""
    user_id = await get_optional_user_id(request)
    if not user_id:
        return CurrentUserResponse(authenticated=False)
    return CurrentUserResponse(
        authenticated=True,
        user_id=user_id,
        role=getattr(request.state, "scope", None),
    )
