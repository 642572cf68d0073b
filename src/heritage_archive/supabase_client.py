"""
Supabase client construction.

The client is built lazily on first use so the service starts (and
serves from the fallback store) even when Supabase is not configured.
"""

import logging

from supabase import Client, create_client

from heritage_archive.config import ArchiveSettings
from heritage_archive.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SupabaseClientFactory:
    """
    Builds and caches a server-side Supabase client.

    Raises ConfigurationError from :meth:`get` while the URL or the
    service role key is missing; a later call retries construction.
    """

    def __init__(self, settings: ArchiveSettings):
        self._settings = settings
        self._client: Client | None = None

    def get(self) -> Client:
        """Return the shared client, creating it on first use."""
        if self._client is not None:
            return self._client

        url = self._settings.supabase_url
        key = self._settings.supabase_service_key
        if not url:
            logger.error("Missing SUPABASE_URL environment variable")
            raise ConfigurationError("Supabase URL not configured", setting="SUPABASE_URL")
        if not key:
            logger.error("Missing SUPABASE_SERVICE_ROLE_KEY environment variable")
            raise ConfigurationError(
                "Supabase service role key not configured",
                setting="SUPABASE_SERVICE_ROLE_KEY",
            )

        logger.info(f"Creating Supabase client with URL: {url[:30]}...")
        self._client = create_client(url, key)
        return self._client
