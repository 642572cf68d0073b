"""
Artifact endpoints.

Public read access to the gallery plus admin-only create, update and
delete. Storage tier failures never reach the client; only a total
failure of create / update surfaces, as a generic 500.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from heritage_archive.api.middleware.auth import require_admin
from heritage_archive.api.schemas.exceptions import InternalError, NotFoundError
from heritage_archive.api.schemas.requests import ArtifactCreateRequest, ArtifactUpdateRequest
from heritage_archive.api.schemas.responses import MessageResponse
from heritage_archive.artifacts import ArtifactRecord, ArtifactService
from heritage_archive.core.exceptions import ArtifactOperationError

router = APIRouter()
logger = logging.getLogger(__name__)


def get_artifact_service(request: Request) -> ArtifactService:
    """Artifact service owned by the running application."""
    return request.app.state.artifact_service


def _not_found(artifact_id: str) -> NotFoundError:
    return NotFoundError(message="Artifact not found", detail=f"No artifact with id '{artifact_id}'")


@router.get("", response_model=list[ArtifactRecord], response_model_by_alias=True)
def list_artifacts(
    service: ArtifactService = Depends(get_artifact_service),
) -> list[ArtifactRecord]:
    """
    List every artifact in the archive, newest first.

    Always succeeds; an unavailable database yields the fallback
    collection (or an empty list).
    """
    return service.get_all()


@router.get("/{artifact_id}", response_model=ArtifactRecord, response_model_by_alias=True)
def get_artifact(
    artifact_id: str,
    service: ArtifactService = Depends(get_artifact_service),
) -> ArtifactRecord:
    """
    Get a single artifact.

    Raises:
        NotFoundError: If no tier has the artifact
    """
    record = service.get_by_id(artifact_id)
    if record is None:
        raise _not_found(artifact_id)
    return record


@router.post(
    "",
    response_model=ArtifactRecord,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
def create_artifact(
    body: ArtifactCreateRequest,
    service: ArtifactService = Depends(get_artifact_service),
    admin: str = Depends(require_admin),
) -> ArtifactRecord:
    """
    Add an artifact to the archive.

    The id and timestamps are assigned by the server.
    """
    logger.info(f"Artifact '{body.title}' submitted by {admin}")
    try:
        return service.create(body)
    except ArtifactOperationError as e:
        raise InternalError(message=e.message) from e


@router.put("/{artifact_id}", response_model=ArtifactRecord, response_model_by_alias=True)
def update_artifact(
    artifact_id: str,
    body: ArtifactUpdateRequest,
    service: ArtifactService = Depends(get_artifact_service),
    admin: str = Depends(require_admin),
) -> ArtifactRecord:
    """
    Partially update an artifact.

    Only the fields present in the body change.

    Raises:
        NotFoundError: If the artifact does not exist
    """
    changes = body.as_changes()
    logger.info(f"Artifact {artifact_id} update by {admin}: {sorted(changes)}")
    try:
        record = service.update(artifact_id, changes)
    except ArtifactOperationError as e:
        raise InternalError(message=e.message) from e

    if record is None:
        raise _not_found(artifact_id)
    return record


@router.delete("/{artifact_id}", response_model=MessageResponse)
def delete_artifact(
    artifact_id: str,
    service: ArtifactService = Depends(get_artifact_service),
    admin: str = Depends(require_admin),
) -> MessageResponse:
    """
    Remove an artifact.

    Raises:
        NotFoundError: If the artifact does not exist
    """
    if not service.delete(artifact_id):
        raise _not_found(artifact_id)
    logger.info(f"Artifact {artifact_id} deleted by {admin}")
    return MessageResponse(message="Artifact deleted successfully")
