# src/cache/artifact_store.py - v2
"""Filesystem storage for rendered report artifacts.

One regular file per cached artifact under ``base_path``. The store knows
nothing about expiry or which entry is current; that is the index's job.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from urllib.parse import quote

from reportcache.cache.errors import CacheError, CacheErrorKind

logger = logging.getLogger(__name__)


class ArtifactStore:
    """Write, read and delete artifact blobs by generated filename."""

    def __init__(self, base_path: Path | str) -> None:
        self._root = Path(base_path).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def initialize(self) -> int:
        """Create the directory and purge files left by a previous run.

        Subdirectories are left alone. A file that cannot be deleted is
        skipped.

        Returns:
            Number of files removed.

        Raises:
            CacheError: INIT_FAILURE if the directory cannot be created or listed.
        """
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            entries = list(self._root.iterdir())
        except OSError as e:
            raise CacheError(
                CacheErrorKind.INIT_FAILURE,
                f"cannot prepare cache directory {self._root}: {e}",
                path=self._root,
            ) from e

        purged = 0
        for entry in entries:
            if entry.is_dir():
                continue
            try:
                entry.unlink()
                purged += 1
            except OSError as e:
                logger.debug("Skipping stale cache file %s: %s", entry, e)

        if purged:
            logger.info("Purged %d stale artifact(s) from %s", purged, self._root)
        return purged

    def path_for(self, student_id: str, fingerprint: str) -> Path:
        """Deterministic location of the artifact for (id, fingerprint)."""
        return self._root / f"student_{_safe(student_id)}_{_safe(fingerprint)}.pdf"

    def write(self, student_id: str, fingerprint: str, data: bytes) -> Path:
        """Store ``data`` and return its location.

        Bytes land in a temp file in the same directory and are moved into
        place with ``os.replace``, so a reader sees either nothing or the
        whole artifact.

        Raises:
            CacheError: WRITE_FAILURE if the filesystem rejects the write.
        """
        path = self.path_for(student_id, fingerprint)
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=self._root
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                _unlink_quietly(Path(tmp_name))
            raise CacheError(
                CacheErrorKind.WRITE_FAILURE,
                f"failed to write cache file {path}: {e}",
                path=path,
            ) from e
        return path

    def read(self, path: Path) -> bytes:
        """Return the stored bytes.

        Raises:
            CacheError: MISSING_BLOB if the file is gone, READ_FAILURE otherwise.
        """
        try:
            return Path(path).read_bytes()
        except FileNotFoundError as e:
            raise CacheError(
                CacheErrorKind.MISSING_BLOB, f"artifact missing: {path}", path=path
            ) from e
        except OSError as e:
            raise CacheError(
                CacheErrorKind.READ_FAILURE, f"cannot read {path}: {e}", path=path
            ) from e

    def remove(self, path: Path) -> bool:
        """Best-effort delete. Returns True if a file was actually removed."""
        return _unlink_quietly(Path(path))


def _safe(part: str) -> str:
    """Percent-encode a filename component.

    Reversible, so distinct ids never share a file. ``_`` is escaped as well
    because it separates the id from the fingerprint.
    """
    return quote(part, safe="").replace("_", "%5F")


def _unlink_quietly(path: Path) -> bool:
    try:
        path.unlink()
        return True
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning("Could not delete artifact %s: %s", path, e)
        return False
