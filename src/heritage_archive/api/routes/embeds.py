"""
Viewer embed endpoint.

Lets the admin form preview what a pasted viewer link or iframe snippet
will be stored as.
"""

from fastapi import APIRouter

from heritage_archive.api.schemas.requests import EmbedResolveRequest
from heritage_archive.api.schemas.responses import EmbedResolveResponse
from heritage_archive.embeds import resolve_reference

router = APIRouter()


@router.post("/resolve", response_model=EmbedResolveResponse)
async def resolve_embed(body: EmbedResolveRequest) -> EmbedResolveResponse:
    """Extract the viewer URL from the input and report whether it is allowed."""
    resolution = resolve_reference(body.input)
    return EmbedResolveResponse(url=resolution.url, valid=resolution.valid)
