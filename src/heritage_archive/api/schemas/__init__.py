"""
Pydantic schemas for API request/response validation.

This module exports all request and response schemas used by the API.
"""

from heritage_archive.api.schemas.exceptions import (
    APIException,
    AuthRequiredError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from heritage_archive.api.schemas.requests import (
    ArtifactCreateRequest,
    ArtifactUpdateRequest,
    EmbedResolveRequest,
    LoginRequest,
)
from heritage_archive.api.schemas.responses import (
    ContactResponse,
    CurrentUserResponse,
    EmbedResolveResponse,
    HealthResponse,
    ImageUploadResponse,
    MessageResponse,
    TokenResponse,
)

__all__ = [
    # Exceptions
    "APIException",
    "ValidationError",
    "NotFoundError",
    "AuthRequiredError",
    "InvalidCredentialsError",
    "InternalError",
    # Requests
    "ArtifactCreateRequest",
    "ArtifactUpdateRequest",
    "LoginRequest",
    "EmbedResolveRequest",
    # Responses
    "MessageResponse",
    "TokenResponse",
    "CurrentUserResponse",
    "EmbedResolveResponse",
    "ImageUploadResponse",
    "ContactResponse",
    "HealthResponse",
]
