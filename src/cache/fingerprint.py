# src/cache/fingerprint.py - v3
"""Content fingerprint of a student snapshot.

Only the fields that change the rendered report take part, joined in a
fixed order with ``:`` and hashed with SHA-256. The digest is truncated to
16 hex characters: short enough for filenames, and collisions are not a
security concern here.
"""

from __future__ import annotations

import hashlib

from reportcache.core.models import Student

FINGERPRINT_LENGTH = 16
_DELIMITER = ":"


def compute_fingerprint(student: Student) -> str:
    """Fingerprint the render-relevant fields of ``student``."""
    return fingerprint_fields(
        name=student.name,
        class_name=student.class_name,
        section=student.section,
        last_updated=student.last_updated,
        admission_date=student.admission_date,
    )


def fingerprint_fields(
    name: str | None = "",
    class_name: str | None = "",
    section: str | None = "",
    last_updated: str | None = "",
    admission_date: str | None = "",
) -> str:
    """Fingerprint raw field values. ``None`` is hashed as an empty string."""
    parts = [name, class_name, section, last_updated, admission_date]
    data = _DELIMITER.join("" if p is None else str(p) for p in parts)
    digest = hashlib.sha256(data.encode("utf-8")).hexdigest()
    return digest[:FINGERPRINT_LENGTH]
