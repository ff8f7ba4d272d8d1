# src/cache/errors.py - v1
"""Tagged error kinds raised by the artifact cache.

Callers branch on ``CacheError.kind``, never on the message text.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class CacheErrorKind(str, Enum):
    """What went wrong inside the cache."""

    INIT_FAILURE = "init_failure"
    WRITE_FAILURE = "write_failure"
    MISSING_BLOB = "missing_blob"
    READ_FAILURE = "read_failure"


class CacheError(Exception):
    """Raised by the artifact store and cache facade."""

    def __init__(
        self,
        kind: CacheErrorKind,
        message: str,
        path: Path | None = None,
    ) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"{kind.value}: {message}")

    @property
    def is_missing(self) -> bool:
        return self.kind is CacheErrorKind.MISSING_BLOB
