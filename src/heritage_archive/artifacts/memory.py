"""
Process-local artifact store.

Holds records in memory in insertion order. Used as the fallback tier
when the primary database is unreachable, and as the whole store in
local development. Contents do not survive a restart.
"""

import logging
from typing import Any

from heritage_archive.artifacts.models import ArtifactRecord, utc_timestamp

logger = logging.getLogger(__name__)

SEED_ARTIFACT_ID = "1"


def seed_records() -> list[ArtifactRecord]:
    """Return the example record every fresh store starts with."""
    now = utc_timestamp()
    return [
        ArtifactRecord(
            id=SEED_ARTIFACT_ID,
            title="UPCYCLED FISHING NET HAMMOCK",
            location="BUSUA, AHANTA REGION, GHANA",
            category="SPACES/",
            capture_date="22/03/2025",
            artist="N/A",
            scanner="FARAI ANINDOR",
            description=(
                "A traditional hammock crafted from upcycled fishing nets, representing "
                "the sustainable practices of coastal Ghanaian communities. This artifact "
                "showcases the ingenuity of local artisans in repurposing marine waste "
                "into functional cultural objects."
            ),
            viewer_reference="https://superspl.at/s?id=eec7679f",
            preview_image_reference="/placeholder.svg?height=400&width=600",
            materials="Recycled fishing nets, rope",
            size="200cm x 80cm x 30cm",
            period="21st Century, Contemporary",
            created_at=now,
            updated_at=now,
        )
    ]


class InMemoryArtifactStore:
    """
    Ordered in-memory collection of artifact records.

    No locking: concurrent requests that mutate the same store may
    interleave. Missing ids are reported as None / False, never raised.
    Records go in and come out as copies; stored records change only
    through :meth:`update`.
    """

    tier = "memory"

    def __init__(self, seed: list[ArtifactRecord] | None = None):
        """
        Initialize the store.

        Args:
            seed: Initial records (default: the single example artifact)
        """
        self._seed = seed
        self._records: list[ArtifactRecord] = []
        self.reset()

    def reset(self) -> None:
        """Drop all records and re-apply the seed."""
        seed = self._seed if self._seed is not None else seed_records()
        self._records = [record.model_copy(deep=True) for record in seed]
        logger.debug(f"In-memory artifact store seeded with {len(self._records)} record(s)")

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, artifact_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == artifact_id:
                return index
        return -1

    def list_all(self) -> list[ArtifactRecord]:
        return [record.model_copy(deep=True) for record in self._records]

    def get(self, artifact_id: str) -> ArtifactRecord | None:
        index = self._index_of(artifact_id)
        return self._records[index].model_copy(deep=True) if index != -1 else None

    def insert(self, record: ArtifactRecord) -> ArtifactRecord:
        self._records.append(record.model_copy(deep=True))
        return record.model_copy(deep=True)

    def update(self, artifact_id: str, changes: dict[str, Any]) -> ArtifactRecord | None:
        """Merge ``changes`` onto the record; ``changes`` carries ``updated_at``."""
        index = self._index_of(artifact_id)
        if index == -1:
            return None

        changes = {k: v for k, v in changes.items() if k not in ("id", "created_at")}
        merged = self._records[index].model_copy(update=changes)
        if "updated_at" not in changes:
            merged.updated_at = utc_timestamp()
        self._records[index] = merged.model_copy(deep=True)
        return merged

    def delete(self, artifact_id: str) -> bool:
        index = self._index_of(artifact_id)
        if index == -1:
            return False
        del self._records[index]
        return True
