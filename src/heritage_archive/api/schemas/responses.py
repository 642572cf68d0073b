"""
Pydantic response schemas for API endpoints.

Artifact endpoints return ``ArtifactRecord`` directly; the models here
cover everything else.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str = Field(..., description="Human-readable result")


class TokenResponse(BaseModel):
    """Response containing a generated admin token."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="Bearer", description="Token type (always Bearer)")
    expires_in: int = Field(description="Token expiration time in seconds")
    user_id: str = Field(description="Identity in the token subject")


class CurrentUserResponse(BaseModel):
    """Who the request's bearer token identifies."""

    authenticated: bool
    user_id: str | None = None
    role: str | None = None


class EmbedResolveResponse(BaseModel):
    """Normalized viewer reference."""

    url: str = Field(description="Extracted viewer URL (or the input, if none found)")
    valid: bool = Field(description="Whether the URL points at the allowed viewer host")


class ImageUploadResponse(BaseModel):
    """Location of an uploaded preview image."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str = Field(description="Public URL of the image")
    path: str = Field(description="Object path within the bucket")
    file_name: str = Field(description="Generated object name")
    message: str = "Image uploaded successfully"


class ContactResponse(BaseModel):
    """Result of a contact form submission."""

    message: str = "Message sent successfully"
    id: str | None = Field(default=None, description="Message-ID of the delivered inquiry")


class HealthResponse(BaseModel):
    """Service health."""

    status: str = Field(..., description="healthy or degraded")
    version: str = Field(..., description="Service version")
    timestamp: str = Field(..., description="ISO timestamp of the check")
    storage_tiers: list[str] = Field(default_factory=list, description="Tiers in fallback order")
    components: dict[str, str] = Field(default_factory=dict, description="Component status")
    recent_failures: list[dict[str, Any]] = Field(
        default_factory=list, description="Recent primary-store failures"
    )
