# tests/unit/reports/test_unit_report_service.py - v2
"""Tests for reports/service.py with mocked collaborators."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from reportcache.cache.errors import CacheError, CacheErrorKind
from reportcache.cache.fingerprint import compute_fingerprint
from reportcache.cache.null_cache import NullArtifactCache
from reportcache.reports.errors import (
    ReportGenerationError,
    StudentNotFoundError,
    UpstreamError,
)
from reportcache.reports.interfaces import ReportRenderer, StudentSource
from reportcache.reports.models import report_filename
from reportcache.reports.service import ReportService


@pytest.fixture
def mock_cache():
    cache = MagicMock()
    cache.get = MagicMock(return_value=None)
    cache.set = MagicMock(return_value=None)
    return cache


class TestReportService:
    def test_defaults_to_null_cache(self, mock_source, mock_renderer):
        service = ReportService(mock_source, mock_renderer)
        assert isinstance(service.cache, NullArtifactCache)

    @pytest.mark.asyncio
    async def test_cache_hit_skips_render(
        self, mock_source, mock_renderer, mock_cache, sample_student
    ):
        mock_cache.get.return_value = b"cached pdf"
        service = ReportService(mock_source, mock_renderer, mock_cache)

        report = await service.generate_report("12345")

        assert report.content == b"cached pdf"
        assert report.from_cache is True
        assert report.filename == "student_12345_report.pdf"
        assert report.fingerprint == compute_fingerprint(sample_student)
        mock_cache.get.assert_called_once_with("12345", report.fingerprint)
        mock_renderer.render.assert_not_called()
        mock_cache.set.assert_not_called()

    @pytest.mark.asyncio
    async def test_cache_miss_renders_and_stores(
        self, mock_source, mock_renderer, mock_cache, pdf_bytes, sample_student
    ):
        service = ReportService(mock_source, mock_renderer, mock_cache)

        report = await service.generate_report("12345")

        fp = compute_fingerprint(sample_student)
        assert report.content == pdf_bytes
        assert report.from_cache is False
        assert report.size_bytes == len(pdf_bytes)
        mock_renderer.render.assert_called_once_with(sample_student)
        mock_cache.set.assert_called_once_with("12345", fp, pdf_bytes)

    @pytest.mark.asyncio
    async def test_cache_write_failure_still_returns_report(
        self, mock_source, mock_renderer, mock_cache, pdf_bytes
    ):
        mock_cache.set.side_effect = CacheError(CacheErrorKind.WRITE_FAILURE, "disk full")
        service = ReportService(mock_source, mock_renderer, mock_cache)

        report = await service.generate_report("12345")

        assert report.content == pdf_bytes
        assert report.from_cache is False

    @pytest.mark.asyncio
    async def test_student_not_found_propagates(self, mock_renderer, mock_cache):
        source = AsyncMock()
        source.get_student = AsyncMock(side_effect=StudentNotFoundError("999"))
        service = ReportService(source, mock_renderer, mock_cache)

        with pytest.raises(StudentNotFoundError):
            await service.generate_report("999")
        mock_cache.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_failure_wrapped(self, mock_renderer, mock_cache):
        source = AsyncMock()
        source.get_student = AsyncMock(side_effect=ConnectionError("refused"))
        service = ReportService(source, mock_renderer, mock_cache)

        with pytest.raises(UpstreamError) as exc_info:
            await service.generate_report("1")
        assert isinstance(exc_info.value.cause, ConnectionError)

    @pytest.mark.asyncio
    async def test_render_failure(self, mock_source, mock_cache):
        renderer = MagicMock()
        renderer.render = MagicMock(side_effect=ValueError("bad template"))
        service = ReportService(mock_source, renderer, mock_cache)

        with pytest.raises(ReportGenerationError, match="bad template"):
            await service.generate_report("12345")
        mock_cache.set.assert_not_called()


class TestReportModels:
    def test_filename(self):
        assert report_filename("42") == "student_42_report.pdf"

    def test_error_messages(self):
        assert "999" in str(StudentNotFoundError("999"))
        err = UpstreamError("1", TimeoutError("slow"))
        assert "slow" in str(err)


class TestInterfaces:
    def test_source_requires_only_get_student(self):
        assert StudentSource.__abstractmethods__ == frozenset({"get_student"})
        assert [m for m in vars(StudentSource) if not m.startswith("_")] == [
            "get_student"
        ]

    def test_renderer_requires_render(self):
        assert ReportRenderer.__abstractmethods__ == frozenset({"render"})
