"""
Health check endpoints.

Reports which storage tiers are serving requests and the most recent
tier failures, so an operator can tell when the archive is running on
its in-memory fallback.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Query, Request

from heritage_archive.api.schemas.responses import HealthResponse
from heritage_archive.version import __version__

router = APIRouter()


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse)
async def health_check(
    request: Request,
    failures: int = Query(10, ge=0, le=50, description="Recent tier failures to include"),
) -> HealthResponse:
    """
    Report service health.

    Status is ``degraded`` when the primary store is not configured or
    has failed recently; the archive keeps answering either way.
    """
    settings = request.app.state.settings
    service = request.app.state.artifact_service

    recent = service.recent_failures()
    components: dict[str, str] = {}

    if settings.primary_store_configured:
        components["primary_store"] = (
            f"degraded: {len(recent)} recent failure(s)" if recent else "healthy"
        )
    else:
        components["primary_store"] = "not configured: serving from memory"

    components["fallback_store"] = f"healthy ({len(service.fallback)} artifacts)"
    components["admin_login"] = "configured" if settings.admin_configured else "not configured"

    degraded = not settings.primary_store_configured or bool(recent)

    return HealthResponse(
        status="degraded" if degraded else "healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        storage_tiers=service.tier_names,
        components=components,
        recent_failures=[f.to_dict() for f in recent[-failures:]] if failures else [],
    )


@router.get("/live")
async def liveness() -> dict[str, str]:
    """
    Liveness check for container orchestration.

    Always succeeds while the process is alive.
    """
    return {
        "alive": "true",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
