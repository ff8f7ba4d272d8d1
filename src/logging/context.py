# src/logging/context.py - v2
"""Contextual logging support: attach request_id and student_id to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set once per incoming report request.
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_student_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "student_id", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    student_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        request_id=_request_id.get(),
        student_id=_student_id.get(),
    )


def set_request_context(request_id: str, student_id: str | None = None) -> None:
    """Set request-level context (called once per report request)."""
    _request_id.set(request_id)
    _student_id.set(student_id)


def set_student_context(student_id: str) -> None:
    """Tag subsequent records with the student being processed."""
    _student_id.set(student_id)


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _student_id.set(None)
