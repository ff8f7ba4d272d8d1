"""reportcache: content-addressed cache for generated student PDF reports."""

from reportcache.version import __version__

__all__ = ["__version__"]
