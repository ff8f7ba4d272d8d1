"""Artifact cache: fingerprint, store, index, sweeper and facades."""

from reportcache.cache.base_artifact_cache import BaseArtifactCache
from reportcache.cache.cache_factory import create_artifact_cache
from reportcache.cache.errors import CacheError, CacheErrorKind
from reportcache.cache.fingerprint import compute_fingerprint

__all__ = [
    "BaseArtifactCache",
    "CacheError",
    "CacheErrorKind",
    "compute_fingerprint",
    "create_artifact_cache",
]
