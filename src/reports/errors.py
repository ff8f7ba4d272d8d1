# src/reports/errors.py - v1
"""Errors surfaced by the report service to its callers."""

from __future__ import annotations


class ReportError(Exception):
    """Base class for report service failures."""


class StudentNotFoundError(ReportError):
    """The backend has no student with the requested id."""

    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        super().__init__(f"Student {student_id!r} not found")


class UpstreamError(ReportError):
    """Fetching student data from the backend failed."""

    def __init__(self, student_id: str, cause: Exception) -> None:
        self.student_id = student_id
        self.cause = cause
        super().__init__(f"Failed to fetch student {student_id!r}: {cause}")


class ReportGenerationError(ReportError):
    """Rendering the PDF report failed."""

    def __init__(self, student_id: str, cause: Exception) -> None:
        self.student_id = student_id
        self.cause = cause
        super().__init__(f"PDF generation failed for student {student_id!r}: {cause}")
