"""Tests for artifact models and the record <-> storage row mapper."""

import pytest
from pydantic import ValidationError

from heritage_archive.artifacts import (
    ArtifactChanges,
    ArtifactDraft,
    ArtifactRecord,
    StoredArtifactRow,
    from_storage,
    to_storage,
    to_storage_changes,
)

from conftest import make_record


def _row(**overrides) -> dict:
    row = {
        "id": "a-1",
        "title": "Kente Cloth",
        "location": None,
        "category": "TEXTILES/",
        "capture_date": None,
        "artist": None,
        "scanner": None,
        "description": None,
        "supersplat_url": "https://superspl.at/s?id=a-1",
        "image_url": None,
        "tags": None,
        "materials": None,
        "size": None,
        "period": None,
        "created_at": "2025-01-01T00:00:00+00:00",
        "updated_at": "2025-01-02T00:00:00+00:00",
    }
    row.update(overrides)
    return row


class TestToStorage:
    """Tests for converting records to storage rows."""

    def test_renames_viewer_and_image_columns(self):
        record = make_record(preview_image_reference="https://cdn/img.png")
        row = to_storage(record)

        assert row.supersplat_url == record.viewer_reference
        assert row.image_url == "https://cdn/img.png"

    def test_empty_text_becomes_null(self):
        row = to_storage(make_record(location="", artist=""))
        assert row.location is None
        assert row.artist is None
        assert row.image_url is None

    def test_tags_preserved_in_order(self):
        row = to_storage(make_record(tags=["b", "a", "b"]))
        assert row.tags == ["b", "a", "b"]

    def test_required_columns_kept(self):
        record = make_record()
        row = to_storage(record)
        assert row.id == record.id
        assert row.title == record.title
        assert row.created_at == record.created_at
        assert row.updated_at == record.updated_at


class TestToStorageChanges:
    """Tests for mapping partial changes."""

    def test_only_present_keys_mapped(self):
        columns = to_storage_changes({"title": "New", "updated_at": "t"})
        assert columns == {"title": "New", "updated_at": "t"}

    def test_viewer_reference_never_nulled(self):
        columns = to_storage_changes({"viewer_reference": ""})
        assert columns == {"supersplat_url": ""}

    def test_cleared_optional_field_becomes_null(self):
        columns = to_storage_changes({"preview_image_reference": "", "period": ""})
        assert columns == {"image_url": None, "period": None}

    def test_cleared_tags_become_empty_list(self):
        assert to_storage_changes({"tags": []}) == {"tags": []}


class TestFromStorage:
    """Tests for converting storage rows to records."""

    def test_nulls_read_back_as_empty(self):
        record = from_storage(StoredArtifactRow.model_validate(_row()))

        assert record.location == ""
        assert record.preview_image_reference == ""
        assert record.tags == []
        assert record.viewer_reference == "https://superspl.at/s?id=a-1"
        assert record.category == "TEXTILES/"

    def test_extra_columns_ignored(self):
        row = StoredArtifactRow.model_validate(_row(owner_id="someone"))
        assert from_storage(row).id == "a-1"

    def test_numeric_id_coerced_to_text(self):
        row = StoredArtifactRow.model_validate(_row(id=42))
        assert from_storage(row).id == "42"

    def test_round_trip_preserves_values(self):
        record = make_record(location="Accra", tags=["wood"], period="19th Century")
        assert from_storage(to_storage(record)) == record


class TestArtifactModels:
    """Tests for the application-facing models."""

    def test_record_serializes_camel_case(self):
        data = make_record(preview_image_reference="x").model_dump(by_alias=True)
        assert data["viewerReference"].startswith("https://superspl.at")
        assert data["previewImageReference"] == "x"
        assert data["captureDate"] == ""
        assert "createdAt" in data and "updatedAt" in data

    def test_record_accepts_camel_case(self):
        record = ArtifactRecord.model_validate(
            {
                "id": "1",
                "title": "T",
                "viewerReference": "https://superspl.at/s?id=1",
                "createdAt": "c",
                "updatedAt": "u",
            }
        )
        assert record.viewer_reference == "https://superspl.at/s?id=1"

    def test_record_requires_title(self):
        with pytest.raises(ValidationError):
            make_record(title="")

    def test_draft_to_record(self):
        draft = ArtifactDraft(title="Drum", viewer_reference="https://superspl.at/s?id=d")
        record = draft.to_record("id-1", "2025-05-01T00:00:00+00:00")

        assert record.id == "id-1"
        assert record.created_at == record.updated_at == "2025-05-01T00:00:00+00:00"
        assert record.title == "Drum"
        assert record.tags == []

    def test_changes_only_include_set_fields(self):
        changes = ArtifactChanges(title="Only Title")
        assert changes.as_changes() == {"title": "Only Title"}

    def test_changes_null_clears_optional_fields(self):
        changes = ArtifactChanges.model_validate({"description": None, "tags": None})
        assert changes.as_changes() == {"description": "", "tags": []}

    def test_changes_null_ignored_for_required_fields(self):
        changes = ArtifactChanges.model_validate({"title": None, "viewerReference": None})
        assert changes.as_changes() == {}
