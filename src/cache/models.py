# src/cache/models.py - v2
"""Cache domain models: CacheEntry, CacheStats.

The index owns every ``CacheEntry``; the artifact store never sees one.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict


def make_cache_key(student_id: str, fingerprint: str) -> str:
    """Serialize the (id, fingerprint) pair used for index lookup."""
    return f"{student_id}:{fingerprint}"


class CacheEntry(BaseModel):
    """Location and expiry of one cached artifact."""

    model_config = ConfigDict(frozen=True)

    student_id: str
    fingerprint: str
    file_path: Path
    created_at: datetime
    expires_at: datetime

    @property
    def key(self) -> str:
        return make_cache_key(self.student_id, self.fingerprint)

    def is_expired(self, now: datetime) -> bool:
        """True once the wall clock is strictly past ``expires_at``."""
        return now > self.expires_at


class CacheStats(BaseModel):
    """Counters reported by a cache facade."""

    hits: int = 0
    misses: int = 0
    writes: int = 0
    write_failures: int = 0
    evictions: int = 0
    expirations: int = 0
    self_heals: int = 0
    entries: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


def utc_now() -> datetime:
    """Default wall clock for expiry decisions."""
    return datetime.now(timezone.utc)
