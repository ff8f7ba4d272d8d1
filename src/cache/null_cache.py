# src/cache/null_cache.py - v1
"""Disabled cache: every lookup misses and every store is dropped."""

from __future__ import annotations

from reportcache.cache.base_artifact_cache import BaseArtifactCache
from reportcache.cache.models import CacheStats


class NullArtifactCache(BaseArtifactCache):
    """Stand-in used when caching is off or could not be initialized."""

    def get(self, student_id: str, fingerprint: str) -> bytes | None:
        return None

    def set(self, student_id: str, fingerprint: str, data: bytes) -> None:
        return None

    def stats(self) -> CacheStats:
        return CacheStats()
