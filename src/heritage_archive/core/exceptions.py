"""
Heritage Archive Exception Hierarchy.

Defines the custom exceptions used across the archive service.
Provides consistent error handling and debugging information.
"""

from typing import Any


class HeritageArchiveError(Exception):
    """
    Base exception for all Heritage Archive errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a HeritageArchiveError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(HeritageArchiveError):
    """
    Errors in service configuration.

    Raised when a required setting (database URL, service key,
    SMTP host) is missing or malformed.
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a ConfigurationError.

        Args:
            message: Human-readable error message
            setting: Name of the offending setting / environment variable
            details: Optional structured data for debugging
        """
        details = details or {}
        if setting:
            details["setting"] = setting

        super().__init__(message, details=details)
        self.setting = setting


class StoreError(HeritageArchiveError):
    """
    Errors raised by an artifact storage tier.

    Covers query failures, network failures and unexpected responses
    from the primary store.
    """

    def __init__(
        self,
        message: str,
        *,
        tier: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a StoreError.

        Args:
            message: Human-readable error message
            tier: Name of the storage tier that failed
            operation: Store operation being performed
            details: Optional structured data for debugging
        """
        details = details or {}
        if tier:
            details["tier"] = tier
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.tier = tier
        self.operation = operation


class StoreRecordNotFound(StoreError):
    """Raised by the primary store when no row matches the requested id."""

    def __init__(self, artifact_id: str, **kwargs):
        super().__init__(f"Artifact not found: {artifact_id}", **kwargs)
        self.artifact_id = artifact_id


class ArtifactOperationError(HeritageArchiveError):
    """
    Raised when an artifact operation failed in every storage tier.

    The message is deliberately generic; tier failures are logged,
    not carried on the exception.
    """

    def __init__(self, message: str, *, operation: str | None = None):
        details = {"operation": operation} if operation else None
        super().__init__(message, details=details)
        self.operation = operation


class ImageValidationError(HeritageArchiveError):
    """Raised when an uploaded preview image is rejected before upload."""

    def __init__(self, message: str, *, field: str = "file"):
        super().__init__(message, details={"field": field})
        self.field = field


class ImageUploadError(HeritageArchiveError):
    """Raised when the object storage rejects or fails an image upload."""

    def __init__(self, message: str, *, path: str | None = None):
        details = {"path": path} if path else None
        super().__init__(message, details=details)
        self.path = path


class ContactDeliveryError(HeritageArchiveError):
    """Raised when a contact inquiry could not be delivered to the inbox."""

    def __init__(self, message: str = "Failed to send message", *, reason: str | None = None):
        details = {"reason": reason} if reason else None
        super().__init__(message, details=details)
        self.reason = reason
