# src/reports/service.py - v1
"""Report service: fetch, fingerprint, serve from cache or render and store.

Usage:
    service = ReportService(source, renderer, cache=create_artifact_cache(settings))
    report = await service.generate_report("42")
"""

from __future__ import annotations

import asyncio
import logging

from reportcache.cache.base_artifact_cache import BaseArtifactCache
from reportcache.cache.errors import CacheError
from reportcache.cache.fingerprint import compute_fingerprint
from reportcache.cache.null_cache import NullArtifactCache
from reportcache.core.models import Student
from reportcache.logging.context import set_student_context
from reportcache.reports.errors import (
    ReportGenerationError,
    StudentNotFoundError,
    UpstreamError,
)
from reportcache.reports.interfaces import ReportRenderer, StudentSource
from reportcache.reports.models import GeneratedReport, report_filename

logger = logging.getLogger(__name__)


class ReportService:
    """Produces student PDF reports, reusing cached bytes when data is unchanged."""

    def __init__(
        self,
        source: StudentSource,
        renderer: ReportRenderer,
        cache: BaseArtifactCache | None = None,
    ) -> None:
        self._source = source
        self._renderer = renderer
        self._cache = cache if cache is not None else NullArtifactCache()

    @property
    def cache(self) -> BaseArtifactCache:
        return self._cache

    async def generate_report(self, student_id: str) -> GeneratedReport:
        """Return the PDF report for ``student_id``.

        Student data is always fetched fresh; only rendering is skipped when
        the fingerprint matches a cached artifact.

        Raises:
            StudentNotFoundError: Unknown student.
            UpstreamError: The backend could not be reached or answered badly.
            ReportGenerationError: Rendering failed.
        """
        set_student_context(student_id)
        student = await self._fetch_student(student_id)
        fingerprint = compute_fingerprint(student)

        cached = await asyncio.to_thread(self._cache.get, student_id, fingerprint)
        if cached is not None:
            logger.info(
                "Report served from cache",
                extra={"data": {"student_id": student_id, "fingerprint": fingerprint}},
            )
            return GeneratedReport(
                student_id=student_id,
                filename=report_filename(student_id),
                content=cached,
                fingerprint=fingerprint,
                from_cache=True,
            )

        content = await self._render(student_id, student)
        await self._store(student_id, fingerprint, content)

        logger.info(
            "Report generated",
            extra={"data": {"student_id": student_id, "pdf_size_bytes": len(content)}},
        )
        return GeneratedReport(
            student_id=student_id,
            filename=report_filename(student_id),
            content=content,
            fingerprint=fingerprint,
        )

    async def _fetch_student(self, student_id: str) -> Student:
        try:
            return await self._source.get_student(student_id)
        except StudentNotFoundError:
            logger.warning("Student %s not found", student_id)
            raise
        except Exception as e:
            logger.error("Failed to fetch student %s: %s", student_id, e)
            raise UpstreamError(student_id, e) from e

    async def _render(self, student_id: str, student: Student) -> bytes:
        try:
            return await asyncio.to_thread(self._renderer.render, student)
        except Exception as e:
            logger.error("PDF generation failed for student %s: %s", student_id, e)
            raise ReportGenerationError(student_id, e) from e

    async def _store(self, student_id: str, fingerprint: str, content: bytes) -> None:
        """Cache the fresh artifact. Failure here never fails the request."""
        try:
            await asyncio.to_thread(self._cache.set, student_id, fingerprint, content)
        except CacheError as e:
            logger.warning(
                "Failed to cache report for student %s (non-critical): %s",
                student_id, e,
            )
