"""
Preview image upload endpoint.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile

from heritage_archive.api.middleware.auth import require_admin
from heritage_archive.api.schemas.exceptions import InternalError, ValidationError
from heritage_archive.api.schemas.responses import ImageUploadResponse
from heritage_archive.artifacts import ImageUploadService
from heritage_archive.core.exceptions import ImageUploadError, ImageValidationError

router = APIRouter()
logger = logging.getLogger(__name__)


def get_image_service(request: Request) -> ImageUploadService:
    return request.app.state.image_service


@router.post("/images", response_model=ImageUploadResponse, response_model_by_alias=True)
async def upload_image(
    file: UploadFile | None = File(None),
    images: ImageUploadService = Depends(get_image_service),
    admin: str = Depends(require_admin),
) -> ImageUploadResponse:
    """
    Upload a preview image for an artifact.

    Returns the public URL to store as the artifact's preview image.

    Raises:
        ValidationError: If no file was sent, it is not an image, or it is too large
        InternalError: If storage rejected the upload
    """
    if file is None:
        raise ValidationError(fields={"file": "No file provided"})

    try:
        # Reject oversized or non-image files before buffering them
        if file.size is not None:
            images.validate(file.content_type, file.size)
        data = await file.read()
        uploaded = await asyncio.to_thread(images.upload, data, file.filename, file.content_type)
    except ImageValidationError as e:
        raise ValidationError(fields={e.field: e.message}) from e
    except ImageUploadError as e:
        raise InternalError(message=e.message) from e

    logger.info(f"Preview image {uploaded.path} uploaded by {admin}")
    return ImageUploadResponse(url=uploaded.url, path=uploaded.path, file_name=uploaded.file_name)
