"""
FastAPI Application Setup.

Main application factory for the Heritage Archive REST API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from heritage_archive.api.middleware.auth import AuthMiddleware
from heritage_archive.api.middleware.cors import add_cors_middleware
from heritage_archive.api.middleware.logging import RequestLoggingMiddleware
from heritage_archive.api.routes import artifacts, auth, contact, embeds, health, uploads
from heritage_archive.api.schemas.exceptions import APIException, InternalError, ValidationError
from heritage_archive.artifacts import (
    ArtifactService,
    ImageUploadService,
    build_artifact_service,
)
from heritage_archive.config import ArchiveSettings, load_settings
from heritage_archive.contact import ContactMailer
from heritage_archive.supabase_client import SupabaseClientFactory
from heritage_archive.version import __version__

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def _validation_fields(exc: RequestValidationError) -> dict[str, str]:
    """Flatten pydantic errors into ``{"field.path": "message"}``."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        message = str(error.get("msg", "Invalid value"))
        if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
            message = message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
        fields.setdefault(name, message)
    return fields


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Heritage Archive API starting up...")
    logger.info(f"Version: {__version__}")
    logger.info(f"Storage tiers: {' -> '.join(app.state.artifact_service.tier_names)}")
    if not app.state.settings.admin_configured:
        logger.warning("No admin credential configured; admin login is disabled")

    yield

    # Shutdown
    logger.info("Heritage Archive API shutting down...")


def create_app(
    settings: ArchiveSettings | None = None,
    service: ArtifactService | None = None,
    mailer: ContactMailer | None = None,
    image_service: ImageUploadService | None = None,
    title: str = "Heritage Archive API",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Service configuration (loaded from the environment if omitted)
        service: Artifact service (built from settings if omitted)
        mailer: Contact mailer (built from settings if omitted)
        image_service: Preview image uploader (built from settings if omitted)
        title: Application title for OpenAPI docs

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or load_settings()
    logging.getLogger("heritage_archive").setLevel(settings.log_level)

    client_factory = SupabaseClientFactory(settings)

    app = FastAPI(
        title=title,
        description="REST API for the 3D cultural heritage archive",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.artifact_service = service or build_artifact_service(settings, client_factory)
    app.state.mailer = mailer or ContactMailer(settings)
    app.state.image_service = image_service or ImageUploadService(
        client_factory,
        bucket=settings.image_bucket,
        max_bytes=settings.max_image_bytes,
    )

    # Add custom middleware
    app.add_middleware(AuthMiddleware, jwt_secret=settings.jwt_secret)
    app.add_middleware(RequestLoggingMiddleware)
    add_cors_middleware(app, allow_origins=settings.cors_origins)

    if not settings.require_auth:
        logger.warning("Authentication DISABLED (HA_REQUIRE_AUTH=false)")

    # Include routers
    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )
    app.include_router(
        artifacts.router,
        prefix="/api/v1/artifacts",
        tags=["Artifacts"],
    )
    app.include_router(
        embeds.router,
        prefix="/api/v1/embeds",
        tags=["Embeds"],
    )
    app.include_router(
        uploads.router,
        prefix="/api/v1/uploads",
        tags=["Uploads"],
    )
    app.include_router(
        contact.router,
        prefix="/api/v1/contact",
        tags=["Contact"],
    )
    app.include_router(
        auth.router,
        prefix="/api/v1/auth",
        tags=["Authentication"],
    )

    # Exception handlers
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
        """Handle API exceptions with proper error responses."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as 400 with per-field messages."""
        error = ValidationError(fields=_validation_fields(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_content())

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        error = InternalError(
            message="An unexpected error occurred",
            detail=str(exc) if logger.isEnabledFor(logging.DEBUG) else None,
        )
        return JSONResponse(status_code=error.status_code, content=error.to_content())

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root() -> dict[str, object]:
        """Root endpoint with API information."""
        return {
            "name": title,
            "version": __version__,
            "status": "operational",
            "docs": "/docs",
            "health": "/health",
            "artifacts": "/api/v1/artifacts",
        }

    return app


# Create default app instance for direct imports
app = create_app()
