# src/cache/file_cache.py - v1
"""File-backed artifact cache with TTL expiry (default when CACHE_ENABLED).

Artifacts live as files under ``base_path``; an in-memory index tracks
which file is current for each student and when it expires. Files from a
previous process are purged at construction.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from threading import Lock
from typing import Callable

from reportcache.cache.artifact_store import ArtifactStore
from reportcache.cache.base_artifact_cache import BaseArtifactCache
from reportcache.cache.errors import CacheError, CacheErrorKind
from reportcache.cache.index import CacheIndex
from reportcache.cache.models import CacheEntry, CacheStats, utc_now
from reportcache.cache.sweeper import DEFAULT_SWEEP_INTERVAL_S, ExpirySweeper

logger = logging.getLogger(__name__)


class FileArtifactCache(BaseArtifactCache):
    """Disk-backed cache holding at most one live artifact per student."""

    def __init__(
        self,
        base_path: Path | str,
        ttl: timedelta,
        sweep_interval_s: float = DEFAULT_SWEEP_INTERVAL_S,
        clock: Callable[[], datetime] = utc_now,
        start_sweeper: bool = True,
    ) -> None:
        """Prepare the cache directory and start the expiry sweeper.

        Args:
            base_path: Directory holding artifact files. Created if absent.
            ttl: Lifetime of an entry from the moment it is set.
            sweep_interval_s: Seconds between background sweeps.
            clock: Wall-clock source, injectable for tests.
            start_sweeper: Set False to drive sweeps manually via ``sweep()``.

        Raises:
            CacheError: INIT_FAILURE if the directory cannot be prepared.
        """
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self._ttl = ttl
        self._clock = clock
        self._store = ArtifactStore(base_path)
        self._store.initialize()
        self._index = CacheIndex()
        self._sweeper = ExpirySweeper(
            self._index, self._store, interval_s=sweep_interval_s,
            clock=clock,
            on_expired=lambda n: self._bump("expirations", n),
        )
        self._stats_lock = Lock()
        self._counters = CacheStats()
        if start_sweeper:
            self._sweeper.start()
        logger.info(
            "FileArtifactCache ready at %s (ttl=%ss)",
            self._store.root, int(ttl.total_seconds()),
        )

    @property
    def base_path(self) -> Path:
        return self._store.root

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    @property
    def index(self) -> CacheIndex:
        return self._index

    def get(self, student_id: str, fingerprint: str) -> bytes | None:
        """Serve the artifact if a live entry exists and its file is readable."""
        entry = self._index.lookup(student_id, fingerprint, self._clock())
        if entry is None:
            self._bump("misses")
            logger.debug("Cache miss for %s:%s", student_id, fingerprint)
            return None

        try:
            data = self._store.read(entry.file_path)
        except CacheError as e:
            if e.kind is CacheErrorKind.MISSING_BLOB:
                self._index.remove_if_missing_on_disk(student_id, fingerprint)
                self._bump("self_heals")
                logger.debug("Dropped dangling entry %s", entry.key)
            else:
                logger.warning("Cache read failed for %s: %s", entry.key, e)
            self._bump("misses")
            return None

        self._bump("hits")
        return data

    def set(self, student_id: str, fingerprint: str, data: bytes) -> None:
        """Write the artifact, then make it the current entry for the student.

        The index is only touched after a successful write.
        """
        try:
            path = self._store.write(student_id, fingerprint, data)
        except CacheError:
            self._bump("write_failures")
            raise

        now = self._clock()
        evicted = self._index.put(
            CacheEntry(
                student_id=student_id,
                fingerprint=fingerprint,
                file_path=path,
                created_at=now,
                expires_at=now + self._ttl,
            )
        )
        for old in evicted:
            if old.file_path != path:
                self._store.remove(old.file_path)
        self._bump("writes")
        if evicted:
            self._bump("evictions", len(evicted))
            logger.debug(
                "Replaced %d stale artifact(s) for student %s", len(evicted), student_id
            )

    def sweep(self, now: datetime | None = None) -> int:
        """Run one expiry sweep synchronously."""
        return self._sweeper.run_once(now)

    def stats(self) -> CacheStats:
        with self._stats_lock:
            counters = self._counters.model_copy()
        counters.entries = len(self._index)
        return counters

    def close(self) -> None:
        self._sweeper.stop()
        logger.debug("FileArtifactCache closed")

    def _bump(self, field: str, amount: int = 1) -> None:
        with self._stats_lock:
            setattr(self._counters, field, getattr(self._counters, field) + amount)
