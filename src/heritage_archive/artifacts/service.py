"""
Artifact service - tiered persistence for artifact records.

Every operation is tried against the storage tiers in order (primary
database first, in-memory store last). A tier that raises is logged and
skipped; the first tier that answers wins. Callers never see a primary
store error: listing degrades to an empty list, lookups to None / False,
and only create / update raise, and only when every tier failed.
"""

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from heritage_archive.artifacts.memory import InMemoryArtifactStore
from heritage_archive.artifacts.models import (
    ArtifactDraft,
    ArtifactRecord,
    utc_timestamp,
)
from heritage_archive.artifacts.supabase_store import SupabaseArtifactStore
from heritage_archive.config import ArchiveSettings
from heritage_archive.core.exceptions import ArtifactOperationError, StoreRecordNotFound
from heritage_archive.supabase_client import SupabaseClientFactory

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_LOG_SIZE = 50


class ArtifactStore(Protocol):
    """Storage tier primitives shared by the primary and fallback stores."""

    tier: str

    def list_all(self) -> list[ArtifactRecord]: ...

    def get(self, artifact_id: str) -> ArtifactRecord | None: ...

    def insert(self, record: ArtifactRecord) -> ArtifactRecord: ...

    def update(self, artifact_id: str, changes: dict[str, Any]) -> ArtifactRecord | None: ...

    def delete(self, artifact_id: str) -> bool: ...


@dataclass
class TierOutcome:
    """Result of one operation attempt against one tier."""

    tier: str
    operation: str
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class TierFailure:
    """A logged tier failure, kept for health reporting."""

    tier: str
    operation: str
    error_type: str
    message: str
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict[str, str]:
        return {
            "tier": self.tier,
            "operation": self.operation,
            "error_type": self.error_type,
            "message": self.message,
            "timestamp": self.timestamp,
        }


class ArtifactService:
    """
    Entry point for listing, fetching, creating, updating and deleting
    artifact records.

    Args:
        primary: Durable store tried first, or None to serve from the
            fallback store only
        fallback: Process-local store used when the primary fails
        failure_log_size: Number of recent tier failures retained
    """

    def __init__(
        self,
        primary: ArtifactStore | None,
        fallback: InMemoryArtifactStore,
        failure_log_size: int = DEFAULT_FAILURE_LOG_SIZE,
    ):
        self._primary = primary
        self._fallback = fallback
        self._tiers: list[ArtifactStore] = [fallback] if primary is None else [primary, fallback]
        self._failures: deque[TierFailure] = deque(maxlen=failure_log_size)

    @property
    def tier_names(self) -> list[str]:
        return [store.tier for store in self._tiers]

    @property
    def fallback(self) -> InMemoryArtifactStore:
        return self._fallback

    def recent_failures(self) -> list[TierFailure]:
        """Return retained tier failures, oldest first."""
        return list(self._failures)

    # ------------------------------------------------------------------
    # Tier composition
    # ------------------------------------------------------------------

    def _attempt(
        self,
        store: ArtifactStore,
        operation: str,
        call: Callable[[ArtifactStore], Any],
    ) -> TierOutcome:
        try:
            return TierOutcome(tier=store.tier, operation=operation, value=call(store))
        except Exception as e:
            if isinstance(e, StoreRecordNotFound):
                logger.info(f"ArtifactService.{operation} - Not found in {store.tier}")
            else:
                logger.warning(
                    f"ArtifactService.{operation} - {store.tier} failed, trying next tier: {e}"
                )
                self._failures.append(
                    TierFailure(
                        tier=store.tier,
                        operation=operation,
                        error_type=type(e).__name__,
                        message=str(e),
                    )
                )
            return TierOutcome(tier=store.tier, operation=operation, error=e)

    def _first_success(
        self,
        operation: str,
        call: Callable[[ArtifactStore], Any],
        accept: Callable[[Any], bool] | None = None,
    ) -> TierOutcome:
        """
        Run ``call`` against each tier until one succeeds.

        ``accept`` can reject a successful but unusable answer from a
        non-final tier (e.g. an empty listing), moving on to the next tier.
        """
        last_ok: TierOutcome | None = None
        outcome: TierOutcome | None = None
        final = len(self._tiers) - 1

        for position, store in enumerate(self._tiers):
            outcome = self._attempt(store, operation, call)
            if not outcome.ok:
                continue
            last_ok = outcome
            if accept is None or position == final or accept(outcome.value):
                logger.debug(f"ArtifactService.{operation} - Served by {store.tier}")
                return outcome
            logger.info(f"ArtifactService.{operation} - No data from {store.tier}, trying next tier")

        return last_ok or outcome

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_all(self) -> list[ArtifactRecord]:
        """List all artifacts. Never raises."""
        outcome = self._first_success("get_all", lambda s: s.list_all(), accept=bool)
        if not outcome.ok:
            logger.error(
                f"ArtifactService.get_all - All tiers failed, returning empty list: {outcome.error}"
            )
            return []
        return outcome.value

    def get_by_id(self, artifact_id: str) -> ArtifactRecord | None:
        """Fetch one artifact, or None if no tier has it."""
        outcome = self._first_success("get_by_id", lambda s: s.get(artifact_id))
        if not outcome.ok:
            logger.error(f"ArtifactService.get_by_id - All tiers failed for {artifact_id}")
            return None
        return outcome.value

    def create(self, draft: ArtifactDraft) -> ArtifactRecord:
        """
        Persist a new artifact.

        Assigns the id and both timestamps.

        Raises:
            ArtifactOperationError: If every tier failed
        """
        record = draft.to_record(str(uuid.uuid4()), utc_timestamp())
        logger.info(f"ArtifactService.create - Creating '{record.title}' as {record.id}")

        outcome = self._first_success("create", lambda s: s.insert(record))
        if not outcome.ok:
            logger.error(
                "ArtifactService.create - All tiers failed",
                exc_info=outcome.error,
            )
            raise ArtifactOperationError("Failed to create artifact", operation="create")

        logger.info(f"ArtifactService.create - Created {outcome.value.id} in {outcome.tier}")
        return outcome.value

    def update(self, artifact_id: str, changes: dict[str, Any]) -> ArtifactRecord | None:
        """
        Merge ``changes`` onto an existing artifact.

        Fields missing from ``changes`` are left untouched; ``updated_at``
        is always refreshed.

        Returns:
            The updated record, or None if the answering tier has no such id

        Raises:
            ArtifactOperationError: If every tier failed
        """
        merge = {k: v for k, v in changes.items() if k not in ("id", "created_at", "updated_at")}
        merge["updated_at"] = utc_timestamp()

        outcome = self._first_success("update", lambda s: s.update(artifact_id, merge))
        if not outcome.ok:
            if isinstance(outcome.error, StoreRecordNotFound):
                return None
            logger.error(
                f"ArtifactService.update - All tiers failed for {artifact_id}",
                exc_info=outcome.error,
            )
            raise ArtifactOperationError("Failed to update artifact", operation="update")
        return outcome.value

    def delete(self, artifact_id: str) -> bool:
        """Remove an artifact. True if removed, False if absent. Never raises."""
        outcome = self._first_success("delete", lambda s: s.delete(artifact_id))
        if not outcome.ok:
            logger.error(f"ArtifactService.delete - All tiers failed for {artifact_id}")
            return False
        return bool(outcome.value)


def build_artifact_service(
    settings: ArchiveSettings,
    client_factory: SupabaseClientFactory | None = None,
) -> ArtifactService:
    """
    Assemble the tiered artifact service from configuration.

    The Supabase tier is only included when its URL and service key are
    configured; otherwise the archive runs on the seeded in-memory store.
    """
    fallback = InMemoryArtifactStore()
    primary = None
    if settings.primary_store_configured:
        factory = client_factory or SupabaseClientFactory(settings)
        primary = SupabaseArtifactStore(factory, table=settings.artifacts_table)
    else:
        logger.warning("Supabase is not configured; artifacts are kept in memory only")
    return ArtifactService(primary=primary, fallback=fallback)
