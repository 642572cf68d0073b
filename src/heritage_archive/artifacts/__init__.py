"""
Heritage Archive Artifacts Module.

Provides artifact records, their storage tiers, and the tiered artifact
service used by the API.
"""

from .images import ImageUploadService, UploadedImage
from .mapper import from_storage, to_storage, to_storage_changes
from .memory import InMemoryArtifactStore, seed_records
from .models import (
    ArtifactChanges,
    ArtifactDraft,
    ArtifactRecord,
    StoredArtifactRow,
)
from .service import ArtifactService, TierFailure, TierOutcome, build_artifact_service
from .supabase_store import SupabaseArtifactStore

__all__ = [
    # Models
    "ArtifactRecord",
    "ArtifactDraft",
    "ArtifactChanges",
    "StoredArtifactRow",
    # Mapping
    "to_storage",
    "to_storage_changes",
    "from_storage",
    # Stores
    "InMemoryArtifactStore",
    "SupabaseArtifactStore",
    "seed_records",
    # Service
    "ArtifactService",
    "TierOutcome",
    "TierFailure",
    "build_artifact_service",
    # Images
    "ImageUploadService",
    "UploadedImage",
]
