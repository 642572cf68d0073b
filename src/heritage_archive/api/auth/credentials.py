"""
Administrator credential check.

The archive has a single administrator whose email and password come
from configuration.
"""

import hmac
import logging

from heritage_archive.config import ArchiveSettings

logger = logging.getLogger(__name__)


def verify_admin_credentials(email: str, password: str, settings: ArchiveSettings) -> bool:
    """
    Check a login attempt against the configured admin credential.

    Returns False when no admin credential is configured.
    """
    if not settings.admin_configured:
        logger.warning("Login attempted but HA_ADMIN_EMAIL / HA_ADMIN_PASSWORD are not set")
        return False

    email_ok = hmac.compare_digest(
        email.strip().lower().encode("utf-8"),
        settings.admin_email.strip().lower().encode("utf-8"),
    )
    password_ok = hmac.compare_digest(
        password.encode("utf-8"),
        settings.admin_password.encode("utf-8"),
    )
    return email_ok and password_ok
