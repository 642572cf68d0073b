"""
Heritage Archive Core Module.

Provides the shared exception hierarchy.
"""

__all__ = [
    "HeritageArchiveError",
    "ConfigurationError",
    "StoreError",
    "StoreRecordNotFound",
    "ArtifactOperationError",
    "ImageValidationError",
    "ImageUploadError",
    "ContactDeliveryError",
]

from heritage_archive.core.exceptions import (
    ArtifactOperationError,
    ConfigurationError,
    ContactDeliveryError,
    HeritageArchiveError,
    ImageUploadError,
    ImageValidationError,
    StoreError,
    StoreRecordNotFound,
)
