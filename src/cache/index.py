# src/cache/index.py - v1
"""In-memory index from (student id, fingerprint) to cache entry.

All access goes through one lock owned by the index. The lock only ever
guards dict operations; callers do their disk I/O after it is released.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock

from reportcache.cache.models import CacheEntry, make_cache_key


class CacheIndex:
    """Thread-safe mapping of cache keys to entries."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._entries: dict[str, CacheEntry] = {}

    def lookup(
        self, student_id: str, fingerprint: str, now: datetime
    ) -> CacheEntry | None:
        """Return the live entry for the exact key, or None.

        Expired entries count as a miss even before the sweeper removes them.
        """
        key = make_cache_key(student_id, fingerprint)
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.is_expired(now):
            return None
        return entry

    def put(self, entry: CacheEntry) -> list[CacheEntry]:
        """Record ``entry`` and drop every other version for the same student.

        Insertion and eviction happen under one lock acquisition so two
        versions of a student are never visible together.

        Returns:
            Evicted entries. The caller deletes their blobs.
        """
        evicted: list[CacheEntry] = []
        with self._lock:
            # Linear scan; table size is bounded by the TTL.
            for key, existing in list(self._entries.items()):
                if (
                    existing.student_id == entry.student_id
                    and existing.fingerprint != entry.fingerprint
                ):
                    evicted.append(self._entries.pop(key))
            self._entries[entry.key] = entry
        return evicted

    def remove_if_missing_on_disk(self, student_id: str, fingerprint: str) -> bool:
        """Drop a dangling entry whose blob has vanished. Idempotent."""
        key = make_cache_key(student_id, fingerprint)
        with self._lock:
            return self._entries.pop(key, None) is not None

    def sweep_expired(self, now: datetime) -> list[CacheEntry]:
        """Remove and return every entry past its expiry."""
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            return [self._entries.pop(k) for k in expired]

    def snapshot(self) -> list[CacheEntry]:
        """Copy of the current entries."""
        with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
