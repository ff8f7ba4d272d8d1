# src/reports/models.py - v1
"""Report service result model."""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedReport(BaseModel):
    """A rendered or cached report ready to send to the client."""

    student_id: str
    filename: str
    content: bytes
    fingerprint: str
    from_cache: bool = False

    @property
    def size_bytes(self) -> int:
        return len(self.content)


def report_filename(student_id: str) -> str:
    """Download filename offered to the client."""
    return f"student_{student_id}_report.pdf"
