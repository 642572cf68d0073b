"""
Pydantic request schemas for API endpoints.

All incoming API requests are validated against these schemas. Artifact
payloads use camelCase keys, matching the records the API returns.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from heritage_archive.artifacts.models import ArtifactChanges, ArtifactDraft
from heritage_archive.embeds import resolve_reference

VIEWER_REFERENCE_ERROR = "Viewer reference must be a SuperSplat URL or iframe embed code"


def _normalize_viewer_reference(value: str) -> str:
    resolution = resolve_reference(value.strip())
    if not resolution.valid:
        raise ValueError(VIEWER_REFERENCE_ERROR)
    return resolution.url


def _split_tags(value: Any) -> Any:
    # the admin form submits tags as one comma-separated string
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return value


class ArtifactCreateRequest(ArtifactDraft):
    """Request to add an artifact to the archive."""

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("viewer_reference")
    @classmethod
    def validate_viewer_reference(cls, v: str) -> str:
        """Accept a viewer link or embed snippet; store the bare viewer URL."""
        return _normalize_viewer_reference(v)

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> Any:
        return _split_tags(v)


class ArtifactUpdateRequest(ArtifactChanges):
    """Partial update; only the keys present in the body are changed."""

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("viewer_reference")
    @classmethod
    def validate_viewer_reference(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _normalize_viewer_reference(v)

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> Any:
        return _split_tags(v)


class LoginRequest(BaseModel):
    """Administrator login."""

    email: str = Field(..., min_length=1, max_length=320, description="Admin email")
    password: str = Field(..., min_length=1, max_length=256, description="Admin password")

    model_config = {"extra": "forbid"}


class EmbedResolveRequest(BaseModel):
    """Viewer link or iframe snippet to normalize."""

    input: str = Field(..., max_length=10_000, description="URL or iframe embed code")

    model_config = {"extra": "forbid"}
