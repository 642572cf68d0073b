"""
Primary artifact store backed by a Supabase (PostgREST) table.

Every call goes over the network. Any failure propagates to the caller
as an exception, including a missing row (StoreRecordNotFound), so the
artifact service can consult its fallback tier.
"""

import logging
from typing import Any

from heritage_archive.artifacts.mapper import from_storage, to_storage, to_storage_changes
from heritage_archive.artifacts.models import ArtifactRecord, StoredArtifactRow
from heritage_archive.core.exceptions import StoreError, StoreRecordNotFound
from heritage_archive.supabase_client import SupabaseClientFactory

logger = logging.getLogger(__name__)


class SupabaseArtifactStore:
    """Artifact CRUD against the ``artifacts`` table."""

    tier = "supabase"

    def __init__(self, client_factory: SupabaseClientFactory, table: str = "artifacts"):
        """
        Initialize the store.

        Args:
            client_factory: Source of the Supabase client (built lazily)
            table: Name of the artifacts table
        """
        self._client_factory = client_factory
        self._table = table

    def _query(self):
        return self._client_factory.get().table(self._table)

    def _rows(self, response: Any, operation: str) -> list[StoredArtifactRow]:
        data = getattr(response, "data", None)
        if data is None:
            raise StoreError("Empty response from primary store", tier=self.tier, operation=operation)
        return [StoredArtifactRow.model_validate(row) for row in data]

    def list_all(self) -> list[ArtifactRecord]:
        response = self._query().select("*").order("created_at", desc=True).execute()
        rows = self._rows(response, "list_all")
        logger.debug(f"Retrieved {len(rows)} artifacts from Supabase")
        return [from_storage(row) for row in rows]

    def get(self, artifact_id: str) -> ArtifactRecord:
        response = self._query().select("*").eq("id", artifact_id).limit(1).execute()
        rows = self._rows(response, "get")
        if not rows:
            raise StoreRecordNotFound(artifact_id, tier=self.tier, operation="get")
        return from_storage(rows[0])

    def insert(self, record: ArtifactRecord) -> ArtifactRecord:
        payload = to_storage(record).model_dump()
        response = self._query().insert(payload).execute()
        rows = self._rows(response, "insert")
        if not rows:
            raise StoreError("Insert returned no row", tier=self.tier, operation="insert")
        return from_storage(rows[0])

    def update(self, artifact_id: str, changes: dict[str, Any]) -> ArtifactRecord:
        """Write only the changed columns; ``changes`` carries ``updated_at``."""
        columns = to_storage_changes(changes)
        columns.pop("id", None)
        columns.pop("created_at", None)
        response = self._query().update(columns).eq("id", artifact_id).execute()
        rows = self._rows(response, "update")
        if not rows:
            raise StoreRecordNotFound(artifact_id, tier=self.tier, operation="update")
        return from_storage(rows[0])

    def delete(self, artifact_id: str) -> bool:
        response = self._query().delete().eq("id", artifact_id).execute()
        rows = self._rows(response, "delete")
        if not rows:
            raise StoreRecordNotFound(artifact_id, tier=self.tier, operation="delete")
        return True
