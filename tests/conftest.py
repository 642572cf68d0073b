"""Pytest configuration and fixtures."""

import os
import time
from typing import Any, Generator
from unittest.mock import MagicMock

import pytest

# Keep the module-level app deterministic regardless of the host environment
os.environ.setdefault("HA_JWT_SECRET", "test-secret")
os.environ.setdefault("HA_ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("HA_ADMIN_PASSWORD", "correct-horse")
os.environ.setdefault("HA_LOG_LEVEL", "INFO")

from fastapi.testclient import TestClient  # noqa: E402

from heritage_archive.api.app import create_app  # noqa: E402
from heritage_archive.api.auth import ADMIN_SCOPE, create_access_token  # noqa: E402
from heritage_archive.artifacts import (  # noqa: E402
    ArtifactRecord,
    ArtifactService,
    ImageUploadService,
    InMemoryArtifactStore,
)
from heritage_archive.config import ArchiveSettings  # noqa: E402
from heritage_archive.contact import ContactMailer  # noqa: E402
from heritage_archive.core.exceptions import StoreError, StoreRecordNotFound  # noqa: E402

TEST_SECRET = "test-secret"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse"


class FailingStore:
    """Primary tier double whose every call fails like an unreachable database."""

    tier = "supabase"

    def __init__(self, message: str = "connection refused"):
        self.message = message
        self.calls: list[str] = []

    def _fail(self, operation: str) -> Any:
        self.calls.append(operation)
        raise StoreError(self.message, tier=self.tier, operation=operation)

    def list_all(self):
        return self._fail("list_all")

    def get(self, artifact_id):
        return self._fail("get")

    def insert(self, record):
        return self._fail("insert")

    def update(self, artifact_id, changes):
        return self._fail("update")

    def delete(self, artifact_id):
        return self._fail("delete")


class WorkingPrimaryStore:
    """
    Primary tier double backed by a dict.

    Mirrors the real primary store: a missing id raises
    StoreRecordNotFound instead of returning None.
    """

    tier = "supabase"

    def __init__(self, records: list[ArtifactRecord] | None = None):
        self._inner = InMemoryArtifactStore(seed=records or [])

    def __len__(self) -> int:
        return len(self._inner)

    def list_all(self):
        return self._inner.list_all()

    def get(self, artifact_id):
        record = self._inner.get(artifact_id)
        if record is None:
            raise StoreRecordNotFound(artifact_id, tier=self.tier)
        return record

    def insert(self, record):
        return self._inner.insert(record)

    def update(self, artifact_id, changes):
        record = self._inner.update(artifact_id, changes)
        if record is None:
            raise StoreRecordNotFound(artifact_id, tier=self.tier)
        return record

    def delete(self, artifact_id):
        if not self._inner.delete(artifact_id):
            raise StoreRecordNotFound(artifact_id, tier=self.tier)
        return True


class SlowPrimaryStore(WorkingPrimaryStore):
    """Primary tier double whose listing blocks like a slow database round trip."""

    def __init__(self, delay: float, records: list[ArtifactRecord] | None = None):
        super().__init__(records)
        self.delay = delay

    def list_all(self):
        time.sleep(self.delay)
        return super().list_all()


def make_record(artifact_id: str = "a-1", **overrides: Any) -> ArtifactRecord:
    """Build a valid artifact record for tests."""
    data: dict[str, Any] = {
        "id": artifact_id,
        "title": f"Artifact {artifact_id}",
        "viewer_reference": f"https://superspl.at/s?id={artifact_id}",
        "created_at": "2025-01-01T00:00:00+00:00",
        "updated_at": "2025-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    return ArtifactRecord(**data)


@pytest.fixture
def settings() -> ArchiveSettings:
    """Settings with an admin credential and no primary store."""
    return ArchiveSettings(
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        jwt_secret=TEST_SECRET,
        require_auth=True,
    )


@pytest.fixture
def memory_store() -> InMemoryArtifactStore:
    """Fresh fallback store holding the seed artifact."""
    return InMemoryArtifactStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def service(memory_store: InMemoryArtifactStore) -> ArtifactService:
    """Artifact service running on the fallback tier only."""
    return ArtifactService(primary=None, fallback=memory_store)


@pytest.fixture
def mailer() -> MagicMock:
    mock_mailer = MagicMock(spec=ContactMailer)
    mock_mailer.send.return_value = "<inquiry-1@okyenacollective.com>"
    return mock_mailer


@pytest.fixture
def image_service() -> MagicMock:
    return MagicMock(spec=ImageUploadService)


@pytest.fixture
def client(
    settings: ArchiveSettings,
    service: ArtifactService,
    mailer: MagicMock,
    image_service: MagicMock,
) -> Generator[TestClient, None, None]:
    """Test client for an application wired to in-process doubles."""
    app = create_app(
        settings=settings,
        service=service,
        mailer=mailer,
        image_service=image_service,
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization header carrying a valid admin token."""
    token = create_access_token(subject=ADMIN_EMAIL, scope=ADMIN_SCOPE, secret=TEST_SECRET)
    return {"Authorization": f"Bearer {token}"}
