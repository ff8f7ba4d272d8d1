# tests/conftest.py - v2
"""Shared test fixtures for unit and integration tests.

Provides sample students, a controllable clock, temp cache directories and
mock report collaborators. No network access; disk I/O stays under tmp_path.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from reportcache.cache.file_cache import FileArtifactCache
from reportcache.core.models import Student


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


# === FIXTURES: Sample data ===


@pytest.fixture
def sample_student() -> Student:
    """Student as decoded from the backend payload."""
    return Student.model_validate(
        {
            "id": 12345,
            "name": "John Doe",
            "email": "john.doe@example.com",
            "systemAccess": True,
            "phone": "1234567890",
            "gender": "Male",
            "dob": "2000-01-01T00:00:00Z",
            "class": "10",
            "section": "A",
            "roll": 15,
            "currentAddress": "123 Main St",
            "permanentAddress": "456 Oak Ave",
            "fatherName": "Robert Doe",
            "motherName": "Jane Doe",
            "guardianName": "Uncle Bob",
            "relationOfGuardian": "Uncle",
            "admissionDate": "2015-06-01T00:00:00Z",
            "reporterName": "Admin",
            "lastUpdated": "2024-01-01T10:00:00Z",
        }
    )


@pytest.fixture
def pdf_bytes() -> bytes:
    return b"%PDF-1.4\n% test report\n%%EOF\n"


# === FIXTURES: Clock and cache ===


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tmp_cache_dir(tmp_path: Path) -> Path:
    """Temporary cache directory (not created; the store creates it)."""
    return tmp_path / "cache" / "pdf-reports"


@pytest.fixture
def file_cache(tmp_cache_dir: Path, clock: FakeClock):
    """FileArtifactCache with a one-hour TTL, fake clock and manual sweeps."""
    cache = FileArtifactCache(
        tmp_cache_dir,
        ttl=timedelta(hours=1),
        clock=clock,
        start_sweeper=False,
    )
    yield cache
    cache.close()


# === FIXTURES: Mock collaborators ===


@pytest.fixture
def mock_source(sample_student: Student) -> AsyncMock:
    """StudentSource returning ``sample_student``."""
    source = AsyncMock()
    source.get_student = AsyncMock(return_value=sample_student)
    return source


@pytest.fixture
def mock_renderer(pdf_bytes: bytes) -> MagicMock:
    """ReportRenderer returning ``pdf_bytes``."""
    renderer = MagicMock()
    renderer.render = MagicMock(return_value=pdf_bytes)
    return renderer
