# src/cache/sweeper.py - v1
"""Background removal of expired cache entries.

The sweeper ticks on a fixed interval for the lifetime of the cache. It is
stopped through a ``threading.Event``; tests call ``run_once`` directly
instead of waiting on the timer.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable

from reportcache.cache.artifact_store import ArtifactStore
from reportcache.cache.index import CacheIndex
from reportcache.cache.models import utc_now

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_S = 60.0


class ExpirySweeper:
    """Periodically evict expired entries from the index and the disk."""

    def __init__(
        self,
        index: CacheIndex,
        store: ArtifactStore,
        interval_s: float = DEFAULT_SWEEP_INTERVAL_S,
        clock: Callable[[], datetime] = utc_now,
        on_expired: Callable[[int], None] | None = None,
    ) -> None:
        if interval_s <= 0:
            raise ValueError("interval_s must be > 0")
        self._index = index
        self._store = store
        self._interval = interval_s
        self._clock = clock
        self._on_expired = on_expired
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self, now: datetime | None = None) -> int:
        """Sweep once and return how many entries were removed."""
        expired = self._index.sweep_expired(now or self._clock())
        for entry in expired:
            try:
                self._store.remove(entry.file_path)
            except Exception:
                logger.warning(
                    "Failed to delete expired artifact %s", entry.file_path,
                    exc_info=True,
                )
        if expired:
            logger.info("Swept %d expired cache entries", len(expired))
            if self._on_expired is not None:
                self._on_expired(len(expired))
        return len(expired)

    def start(self) -> None:
        """Launch the sweep loop in a daemon thread. No-op if already running."""
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop, name="cache-expiry-sweeper", daemon=True
        )
        self._thread.start()
        logger.debug("Expiry sweeper started (interval=%.1fs)", self._interval)

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to exit and wait for it."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    def _loop(self) -> None:
        while not self._stop.wait(self._interval):
            try:
                self.run_once()
            except Exception:
                logger.exception("Expiry sweep failed")
