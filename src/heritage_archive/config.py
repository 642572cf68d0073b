"""
Service configuration.

All runtime settings come from environment variables. The Supabase
variables keep the names used by the deployed web front end so that
both processes can share one environment file.
"""

import logging
import os

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS: list[str] = [
    "http://localhost:3000",
    "http://localhost:8000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8000",
]

DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024
MAX_TOKEN_EXPIRATION_HOURS = 168

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SMTPSettings(BaseModel):
    """Outgoing mail settings for the contact inbox."""

    host: str = "localhost"
    port: int = 587
    use_tls: bool = True
    username: str | None = None
    password: str | None = None
    timeout_seconds: int = 30


class ArchiveSettings(BaseModel):
    """Configuration for the archive service."""

    # Primary store
    supabase_url: str | None = Field(default=None, description="Supabase project URL")
    supabase_service_key: str | None = Field(
        default=None, description="Supabase service role key"
    )
    artifacts_table: str = Field(default="artifacts", description="Artifact table name")

    # Preview images
    image_bucket: str = Field(default="images", description="Storage bucket for previews")
    max_image_bytes: int = Field(default=DEFAULT_MAX_IMAGE_BYTES, ge=1)

    # Admin authentication
    admin_email: str | None = None
    admin_password: str | None = None
    jwt_secret: str | None = None
    token_expiration_hours: float = Field(default=24.0, gt=0, le=MAX_TOKEN_EXPIRATION_HOURS)
    require_auth: bool = True

    # HTTP
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    # Contact inbox
    smtp: SMTPSettings = Field(default_factory=SMTPSettings)
    contact_from_address: str = "contact@okyenacollective.com"
    contact_from_name: str = "Okyena Collective"
    contact_inbox: str = "okyena.collective@gmail.com"

    @property
    def primary_store_configured(self) -> bool:
        """True when both Supabase settings are present."""
        return bool(self.supabase_url and self.supabase_service_key)

    @property
    def admin_configured(self) -> bool:
        """True when an admin credential is available for login."""
        return bool(self.admin_email and self.admin_password)


def _env_bool(key: str, default: bool) -> bool:
    val = os.getenv(key, "").strip().lower()
    if val in ("true", "1", "yes"):
        return True
    if val in ("false", "0", "no"):
        return False
    return default


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {key}: {raw}, using default {default}")
        return default


def _env_float(key: str, default: float, *, minimum: float, maximum: float) -> float:
    raw = os.getenv(key)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not minimum < value <= maximum:
        logger.warning(f"Invalid {key}: {raw}, using default {default}")
        return default
    return value


def _env_log_level(key: str, default: str = "INFO") -> str:
    raw = (os.getenv(key) or default).strip().upper()
    if raw not in LOG_LEVELS:
        logger.warning(f"Invalid {key}: {raw}, using default {default}")
        return default
    return raw


def _env_list(key: str, default: list[str]) -> list[str]:
    raw = os.getenv(key, "")
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or list(default)


def load_settings() -> ArchiveSettings:
    """Load configuration from environment."""
    smtp = SMTPSettings(
        host=os.getenv("HA_SMTP_HOST", "localhost"),
        port=_env_int("HA_SMTP_PORT", 587),
        use_tls=_env_bool("HA_SMTP_USE_TLS", True),
        username=os.getenv("HA_SMTP_USERNAME") or None,
        password=os.getenv("HA_SMTP_PASSWORD") or None,
    )

    return ArchiveSettings(
        supabase_url=os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL") or None,
        supabase_service_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None,
        artifacts_table=os.getenv("HA_ARTIFACTS_TABLE", "artifacts"),
        image_bucket=os.getenv("HA_IMAGE_BUCKET", "images"),
        max_image_bytes=_env_int("HA_MAX_IMAGE_BYTES", DEFAULT_MAX_IMAGE_BYTES),
        admin_email=os.getenv("HA_ADMIN_EMAIL") or None,
        admin_password=os.getenv("HA_ADMIN_PASSWORD") or None,
        jwt_secret=os.getenv("HA_JWT_SECRET") or None,
        token_expiration_hours=_env_float(
            "HA_TOKEN_EXPIRATION_HOURS", 24.0, minimum=0, maximum=MAX_TOKEN_EXPIRATION_HOURS
        ),
        require_auth=_env_bool("HA_REQUIRE_AUTH", True),
        cors_origins=_env_list("HA_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        log_level=_env_log_level("HA_LOG_LEVEL"),
        smtp=smtp,
        contact_from_address=os.getenv("HA_CONTACT_FROM", "contact@okyenacollective.com"),
        contact_inbox=os.getenv("HA_CONTACT_INBOX", "okyena.collective@gmail.com"),
    )
