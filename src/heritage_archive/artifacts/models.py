"""
Pydantic models for artifact records.

Two shapes exist for the same entity: ``ArtifactRecord`` is what the
service and API work with (defaulted text fields, camelCase JSON), and
``StoredArtifactRow`` mirrors the primary database table (snake_case,
nullable columns). The mapper module converts between them.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Optional free-text fields; absent values read back as ""
OPTIONAL_TEXT_FIELDS: tuple[str, ...] = (
    "location",
    "category",
    "capture_date",
    "artist",
    "scanner",
    "description",
    "materials",
    "size",
    "period",
    "preview_image_reference",
)


def utc_timestamp() -> str:
    """Return the current UTC time as sortable ISO-8601 text."""
    return datetime.now(timezone.utc).isoformat()


class _CamelModel(BaseModel):
    """Base for application-facing models (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArtifactRecord(_CamelModel):
    """A catalogued artifact as seen by the service and its callers."""

    id: str = Field(description="Opaque unique identifier")
    title: str = Field(min_length=1, description="Display name")
    location: str = Field(default="", description="Where the object was captured")
    category: str = Field(default="", description="Gallery category")
    capture_date: str = Field(default="", description="Date of the 3D capture")
    artist: str = Field(default="", description="Maker of the object")
    scanner: str = Field(default="", description="Person who made the scan")
    description: str = Field(default="", description="Long-form description")
    materials: str = Field(default="", description="Materials of the object")
    size: str = Field(default="", description="Physical dimensions")
    period: str = Field(default="", description="Historical period")
    viewer_reference: str = Field(description="Embeddable 3D viewer URL")
    preview_image_reference: str = Field(default="", description="2D preview image URL")
    tags: list[str] = Field(default_factory=list, description="Ordered tags")
    created_at: str = Field(description="ISO timestamp of creation")
    updated_at: str = Field(description="ISO timestamp of last update")

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


class ArtifactDraft(_CamelModel):
    """Caller-supplied data for a new artifact (no id, no timestamps)."""

    title: str = Field(min_length=1)
    location: str = ""
    category: str = ""
    capture_date: str = ""
    artist: str = ""
    scanner: str = ""
    description: str = ""
    materials: str = ""
    size: str = ""
    period: str = ""
    viewer_reference: str
    preview_image_reference: str = ""
    tags: list[str] = Field(default_factory=list)

    def to_record(self, artifact_id: str, timestamp: str) -> ArtifactRecord:
        """Build the full record the service will persist."""
        return ArtifactRecord(
            id=artifact_id,
            created_at=timestamp,
            updated_at=timestamp,
            **self.model_dump(),
        )


class ArtifactChanges(_CamelModel):
    """
    Partial update for an existing artifact.

    Only fields the caller actually set take part in the merge; see
    :meth:`as_changes`.
    """

    title: str | None = Field(default=None, min_length=1)
    location: str | None = None
    category: str | None = None
    capture_date: str | None = None
    artist: str | None = None
    scanner: str | None = None
    description: str | None = None
    materials: str | None = None
    size: str | None = None
    period: str | None = None
    viewer_reference: str | None = None
    preview_image_reference: str | None = None
    tags: list[str] | None = None

    def as_changes(self) -> dict[str, Any]:
        """
        Return the explicitly set fields as a merge dict.

        An explicit null clears an optional field; it never clears the
        required title or viewer reference.
        """
        changes: dict[str, Any] = {}
        for name, value in self.model_dump(exclude_unset=True).items():
            if value is None:
                if name in OPTIONAL_TEXT_FIELDS:
                    changes[name] = ""
                elif name == "tags":
                    changes[name] = []
                continue
            changes[name] = value
        return changes


class StoredArtifactRow(BaseModel):
    """Row of the primary store's ``artifacts`` table."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    location: str | None = None
    category: str | None = None
    capture_date: str | None = None
    artist: str | None = None
    scanner: str | None = None
    description: str | None = None
    supersplat_url: str
    image_url: str | None = None
    tags: list[str] | None = None
    materials: str | None = None
    size: str | None = None
    period: str | None = None
    created_at: str
    updated_at: str

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        # uuid / bigint primary keys come back as non-strings from some drivers
        return v if isinstance(v, str) else str(v)
