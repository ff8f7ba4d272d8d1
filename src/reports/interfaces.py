# src/reports/interfaces.py - v2
"""Collaborators the report service depends on.

Concrete backends (HTTP client, PDF engine) live outside this package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from reportcache.core.models import Student


class StudentSource(ABC):
    """Fetches the current snapshot of a student."""

    @abstractmethod
    async def get_student(self, student_id: str) -> Student:
        """Return the student.

        Raises:
            StudentNotFoundError: If the student does not exist.
        """


class ReportRenderer(ABC):
    """Turns a student snapshot into PDF bytes."""

    @abstractmethod
    def render(self, student: Student) -> bytes:
        """Render the report. CPU-bound; called from a worker thread."""
