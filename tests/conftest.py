"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from strapi_migrate import MigrationConfig

SOURCE_URL = "http://localhost:1337"
TARGET_URL = "https://cloud.example.strapi.app"

ENV_VARS = (
    "LOCAL_STRAPI_URL",
    "STRAPI_API_TOKEN",
    "CLOUD_STRAPI_URL",
    "CLOUD_STRAPI_API_TOKEN",
    "STRAPI_MIGRATE_EXPORT_DIR",
    "STRAPI_MIGRATE_BATCH_SIZE",
    "STRAPI_MIGRATE_BATCH_DELAY",
    "STRAPI_MIGRATE_REQUEST_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and .env file out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """Directory for export files."""
    path = tmp_path / "exports"
    path.mkdir()
    return path


@pytest.fixture
def migration_config(export_dir: Path) -> MigrationConfig:
    """Create a test configuration.

    Returns:
        Configuration with both tokens set and no inter-batch delay
    """
    return MigrationConfig(
        source_url=SOURCE_URL,
        source_token="source-token-12345678",
        target_url=TARGET_URL,
        target_token="target-token-12345678",
        export_dir=export_dir,
        batch_delay=0.0,
    )


@pytest.fixture
def sleep_recorder() -> list[float]:
    """List that the recording_sleep fixture appends delays to."""
    return []


@pytest.fixture
def recording_sleep(sleep_recorder: list[float]):
    """Sleep replacement that records the requested delay and returns at once."""

    async def _sleep(delay: float) -> None:
        sleep_recorder.append(delay)

    return _sleep


@pytest.fixture
def mock_v5_entries() -> list[dict]:
    """Entries as returned by a Strapi v5 collection endpoint."""
    return [
        {
            "id": 1,
            "documentId": "abc123",
            "title": "Victoria Memorial",
            "rating": 4.8,
            "tags": ["museum", "heritage"],
            "location": {"lat": 22.5448, "lng": 88.3426},
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-02T00:00:00.000Z",
            "publishedAt": "2024-01-03T00:00:00.000Z",
        },
        {
            "id": 2,
            "documentId": "def456",
            "title": "Howrah Bridge",
            "rating": 4.6,
            "tags": [],
            "location": None,
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-02T00:00:00.000Z",
            "publishedAt": None,
        },
    ]


@pytest.fixture
def write_export_file():
    """Return a helper writing an export file the way the exporter does."""

    def _write(directory: Path, content_type: str, content: object) -> Path:
        path = directory / f"{content_type}.json"
        path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return path

    return _write
