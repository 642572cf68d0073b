"""
Preview image uploads.

Stores 2D preview images for artifacts in a Supabase Storage bucket and
returns their public URL, which the admin panel then saves as the
artifact's preview image reference.
"""

import logging
import time
import uuid
from dataclasses import dataclass

from heritage_archive.config import DEFAULT_MAX_IMAGE_BYTES
from heritage_archive.core.exceptions import (
    ConfigurationError,
    ImageUploadError,
    ImageValidationError,
)
from heritage_archive.supabase_client import SupabaseClientFactory

logger = logging.getLogger(__name__)

IMAGE_PREFIX = "artifact-images"
DEFAULT_EXTENSION = "jpg"


@dataclass
class UploadedImage:
    """Location of a stored preview image."""

    url: str
    path: str
    file_name: str


def image_extension(filename: str | None) -> str:
    """Return the lowercased extension of ``filename`` (default ``jpg``)."""
    if not filename or "." not in filename:
        return DEFAULT_EXTENSION
    ext = filename.rsplit(".", 1)[-1].strip().lower()
    return ext or DEFAULT_EXTENSION


def object_name(filename: str | None, now_ms: int | None = None) -> str:
    """Build a unique object name such as ``artifact-1718000000000-3f9a1c2b7d4e.png``."""
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"artifact-{timestamp}-{uuid.uuid4().hex[:12]}.{image_extension(filename)}"


class ImageUploadService:
    """Validates and uploads preview images."""

    def __init__(
        self,
        client_factory: SupabaseClientFactory,
        bucket: str = "images",
        max_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    ):
        self._client_factory = client_factory
        self._bucket = bucket
        self._max_bytes = max_bytes

    def validate(self, content_type: str | None, size: int) -> None:
        """
        Reject files that are not images or exceed the size limit.

        Raises:
            ImageValidationError: If the file is rejected
        """
        if size <= 0:
            raise ImageValidationError("No file provided")
        if not content_type or not content_type.startswith("image/"):
            raise ImageValidationError("File must be an image")
        if size > self._max_bytes:
            limit_mb = self._max_bytes // (1024 * 1024)
            raise ImageValidationError(f"File size must be less than {limit_mb}MB")

    def upload(self, data: bytes, filename: str | None, content_type: str | None) -> UploadedImage:
        """
        Upload an image and return its public location.

        Raises:
            ImageValidationError: If the file is rejected
            ImageUploadError: If storage is unavailable or the upload fails
        """
        self.validate(content_type, len(data))

        file_name = object_name(filename)
        path = f"{IMAGE_PREFIX}/{file_name}"
        logger.info(f"Uploading preview image {path} ({content_type}, {len(data)} bytes)")

        try:
            bucket = self._client_factory.get().storage.from_(self._bucket)
            bucket.upload(
                path=path,
                file=data,
                file_options={"content-type": content_type, "upsert": "false"},
            )
            url = bucket.get_public_url(path)
        except ConfigurationError as e:
            logger.error(f"Image storage is not configured: {e}")
            raise ImageUploadError("Image storage is not configured", path=path) from e
        except Exception as e:
            logger.error(f"Failed to upload image {path}: {e}")
            raise ImageUploadError("Failed to upload image", path=path) from e

        if not url:
            raise ImageUploadError("Failed to get public URL", path=path)

        logger.info(f"Preview image available at {url}")
        return UploadedImage(url=url, path=path, file_name=file_name)
