"""
Conversion between application records and primary-store rows.

Empty strings on the application side and NULL columns on the storage
side are the same value; the collapse is intentional and one-way
round-trips normalize it.
"""

from typing import Any

from heritage_archive.artifacts.models import ArtifactRecord, StoredArtifactRow

# application field -> storage column, where the names differ
_COLUMN_NAMES: dict[str, str] = {
    "viewer_reference": "supersplat_url",
    "preview_image_reference": "image_url",
}

# columns that must never be written as NULL
_REQUIRED_COLUMNS = {"id", "title", "supersplat_url", "created_at", "updated_at"}


def _column_value(column: str, value: Any) -> Any:
    if column == "tags":
        return list(value or [])
    if column in _REQUIRED_COLUMNS:
        return value
    return value or None


def to_storage(record: ArtifactRecord) -> StoredArtifactRow:
    """Convert an application record to its storage row."""
    return StoredArtifactRow(**to_storage_changes(record.model_dump()))


def to_storage_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """
    Map a (possibly partial) dict of application fields to storage columns.

    Only the keys present in ``changes`` appear in the result.
    """
    columns: dict[str, Any] = {}
    for field_name, value in changes.items():
        column = _COLUMN_NAMES.get(field_name, field_name)
        columns[column] = _column_value(column, value)
    return columns


def from_storage(row: StoredArtifactRow) -> ArtifactRecord:
    """Convert a storage row to an application record."""
    return ArtifactRecord(
        id=row.id,
        title=row.title,
        location=row.location or "",
        category=row.category or "",
        capture_date=row.capture_date or "",
        artist=row.artist or "",
        scanner=row.scanner or "",
        description=row.description or "",
        materials=row.materials or "",
        size=row.size or "",
        period=row.period or "",
        viewer_reference=row.supersplat_url,
        preview_image_reference=row.image_url or "",
        tags=list(row.tags or []),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
