# src/cache/base_artifact_cache.py - v1
"""Abstract artifact cache interface consumed by the report service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from reportcache.cache.models import CacheStats


class BaseArtifactCache(ABC):
    """Get/set contract for cached report artifacts."""

    @abstractmethod
    def get(self, student_id: str, fingerprint: str) -> bytes | None:
        """Return cached bytes for (id, fingerprint), or None on a miss."""

    @abstractmethod
    def set(self, student_id: str, fingerprint: str, data: bytes) -> None:
        """Store bytes as the current artifact for ``student_id``.

        Raises:
            CacheError: WRITE_FAILURE if the artifact could not be stored.
        """

    @abstractmethod
    def stats(self) -> CacheStats:
        """Current counters."""

    def close(self) -> None:
        """Release background resources."""

    def __enter__(self) -> BaseArtifactCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
