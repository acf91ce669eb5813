# indexnow_sync/cache/store.py
"""
Load and save the page-fingerprint cache.

Corruption never blocks a build: a missing, unreadable or malformed cache
file loads as an empty mapping. Saving always rewrites the whole file.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Optional

from indexnow_sync.logging import LOG_PREFIX, get_logger

logger = get_logger(__name__)

CACHE_FILENAME = ".indexnow-cache.json"

Cache = Dict[str, str]


def resolve_cache_path(
    cache_dir: Optional[str | Path] = None,
    project_root: Optional[str | Path] = None,
) -> Path:
    """
    Resolve the cache file location.

    cache_dir is resolved against project_root (default: cwd); without it
    the cache lives directly in the project root.
    """
    root = Path(project_root) if project_root is not None else Path.cwd()
    if cache_dir:
        return (root / cache_dir).resolve() / CACHE_FILENAME
    return root / CACHE_FILENAME


class CacheStore:
    """
    File-backed url -> fingerprint cache.

    Usage:
        store = CacheStore(resolve_cache_path(".cache"))
        store.ensure_storage_ready()
        previous = store.load()
        ...
        store.save(next_cache)
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_storage_ready(self) -> None:
        """Create the parent directory and an empty cache file if missing."""
        directory = self._path.parent
        if not directory.exists():
            logger.debug(f"{LOG_PREFIX} creating cache directory: {directory}")
            directory.mkdir(parents=True, exist_ok=True)

        exists = self._path.exists()
        logger.debug(f"{LOG_PREFIX} cache exists: {exists} ({self._path})")

        if not exists:
            logger.debug(f"{LOG_PREFIX} creating cache file")
            self._path.write_text("{}", encoding="utf-8")

    def load(self) -> Cache:
        """
        Read the persisted cache.

        Returns an empty mapping if the file is missing, unreadable, not JSON,
        or not a JSON object. Non-string entries are dropped.
        """
        logger.debug(f"{LOG_PREFIX} loading cache file")
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"{LOG_PREFIX} no cache file at {self._path}, starting empty")
            return {}
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning(f"{LOG_PREFIX} cache file unreadable, resetting ({e})")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"{LOG_PREFIX} cache file is not a JSON object, resetting")
            return {}

        cache = {
            url: fingerprint
            for url, fingerprint in data.items()
            if isinstance(url, str) and isinstance(fingerprint, str)
        }
        if len(cache) != len(data):
            logger.warning(
                f"{LOG_PREFIX} dropped {len(data) - len(cache)} malformed cache entries"
            )
        return cache

    def save(self, cache: Cache) -> None:
        """Replace the persisted cache with the given mapping."""
        logger.debug(f"{LOG_PREFIX} writing cache file ({len(cache)} entries)")
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f"{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(cache, f, indent=2)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _file_mode(self) -> int:
        """Mode of the existing cache file, else what a plain open() would give."""
        try:
            return stat.S_IMODE(os.stat(self._path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def clear(self) -> bool:
        """Delete the cache file. Returns True if a file was removed."""
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        logger.debug(f"{LOG_PREFIX} removed cache file {self._path}")
        return True


__all__ = ["CACHE_FILENAME", "Cache", "CacheStore", "resolve_cache_path"]
