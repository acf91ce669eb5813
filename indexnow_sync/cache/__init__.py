# indexnow_sync/cache/__init__.py
"""
Persistent page-fingerprint cache.

The cache file (.indexnow-cache.json) is the only state kept between runs:
a flat JSON object mapping page URL to fingerprint.
"""

from .store import CACHE_FILENAME, Cache, CacheStore, resolve_cache_path

__all__ = ["CACHE_FILENAME", "Cache", "CacheStore", "resolve_cache_path"]
