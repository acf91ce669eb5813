# indexnow_sync/diff/differ.py
"""
Change detection between the current walk and the persisted cache.

Key design decision:
- The next cache is always rebuilt from the current walk alone
- A page is "changed" if the cache has no entry for it or a different fingerprint
- Pages that vanished are dropped from the next cache and never submitted

This module ONLY computes the diff - it performs no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from indexnow_sync.diff.scanner import PageRecord
from indexnow_sync.logging import LOG_PREFIX, get_logger

logger = get_logger(__name__)


@dataclass
class DiffResult:
    """
    Result of diff computation.

    - changed_urls: new or changed pages, in discovery order
    - unchanged_urls: pages whose fingerprint matches the cache
    - removed_urls: cached pages missing from the walk (diagnostic only)
    - next_cache: url -> fingerprint for every page in the walk
    """

    changed_urls: List[str] = field(default_factory=list)
    unchanged_urls: List[str] = field(default_factory=list)
    removed_urls: List[str] = field(default_factory=list)
    next_cache: Dict[str, str] = field(default_factory=dict)

    @property
    def has_changes(self) -> bool:
        return bool(self.changed_urls)

    @property
    def summary(self) -> str:
        """Get a summary string."""
        return (
            f"changed={len(self.changed_urls)}, "
            f"unchanged={len(self.unchanged_urls)}, "
            f"removed={len(self.removed_urls)}"
        )


class ChangeDetector:
    """
    Computes the diff between a site walk and the previous cache.

    The diff algorithm:
    1. Rebuild url -> fingerprint from the walk (the next cache)
    2. Same fingerprint in the previous cache -> unchanged
    3. Missing or different fingerprint -> changed
    4. Cached urls absent from the walk -> removed (reported, not submitted)

    Usage:
        detector = ChangeDetector(previous_cache)
        result = detector.detect(pages)

        for url in result.changed_urls:
            # These pages need to be submitted
            pass
    """

    def __init__(self, previous_cache: Mapping[str, str]) -> None:
        self._previous = previous_cache

    def detect(self, pages: Iterable[PageRecord]) -> DiffResult:
        """
        Diff the walked pages against the previous cache.

        Args:
            pages: PageRecords in discovery order.

        Returns:
            DiffResult whose next_cache fully replaces the previous cache.
        """
        next_cache: Dict[str, str] = {}
        for page in pages:
            # Later duplicates overwrite the fingerprint but keep first position.
            next_cache[page.url] = page.fingerprint

        result = DiffResult(next_cache=next_cache)

        logger.debug(f"{LOG_PREFIX} page diff:")
        for url, fingerprint in next_cache.items():
            if self._previous.get(url) == fingerprint:
                result.unchanged_urls.append(url)
                logger.debug(f" - {url} (unchanged)")
            else:
                result.changed_urls.append(url)
                logger.debug(f" - {url} (new/changed)")

        result.removed_urls = sorted(set(self._previous) - set(next_cache))
        for url in result.removed_urls:
            logger.debug(f" - {url} (removed, not submitted)")

        logger.info(f"{LOG_PREFIX} diff computed: {result.summary}")

        return result


def compute_diff(
    pages: Iterable[PageRecord],
    previous_cache: Mapping[str, str],
) -> DiffResult:
    """
    Convenience function to compute the diff.

    Args:
        pages: PageRecords in discovery order.
        previous_cache: url -> fingerprint from the last run.

    Returns:
        DiffResult with changed urls and the next cache.
    """
    return ChangeDetector(previous_cache).detect(pages)


__all__ = ["ChangeDetector", "DiffResult", "compute_diff"]
