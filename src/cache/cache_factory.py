# src/cache/cache_factory.py - v3
"""Factory for artifact cache instantiation.

The cache is optional: when it is disabled, or its directory cannot be
prepared, callers get a ``NullArtifactCache`` and keep working.
"""

from __future__ import annotations

import logging

from reportcache.cache.base_artifact_cache import BaseArtifactCache
from reportcache.cache.errors import CacheError
from reportcache.cache.null_cache import NullArtifactCache
from reportcache.config.settings import Settings

logger = logging.getLogger(__name__)


def create_artifact_cache(
    settings: Settings | None = None, start_sweeper: bool = True
) -> BaseArtifactCache:
    """Instantiate the configured artifact cache.

    Args:
        settings: Application settings. Defaults are used if None.
        start_sweeper: Start the background expiry loop.

    Returns:
        FileArtifactCache, or NullArtifactCache if caching is unavailable.
    """
    if settings is None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

    if not settings.cache_enabled:
        logger.info("Report cache disabled by configuration")
        return NullArtifactCache()

    from reportcache.cache.file_cache import FileArtifactCache

    try:
        return FileArtifactCache(
            base_path=settings.cache_path,
            ttl=settings.cache_ttl,
            sweep_interval_s=settings.cache_sweep_interval,
            start_sweeper=start_sweeper,
        )
    except CacheError as e:
        logger.error("Report cache unavailable, continuing without it: %s", e)
        return NullArtifactCache()
