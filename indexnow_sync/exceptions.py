# indexnow_sync/exceptions.py
"""
Exception hierarchy for indexnow-sync.

Only ConfigError and TraversalError are raised out of a run; they abort it
before the cache is touched. SubmissionError is carried as a value inside a
BatchResult and never propagates.
"""

from __future__ import annotations

from typing import Optional


class IndexNowSyncError(Exception):
    """Base class for all indexnow-sync errors."""


class ConfigError(IndexNowSyncError):
    """Missing or invalid run configuration (key, site URL, options)."""


class TraversalError(IndexNowSyncError):
    """A directory or page file under the output root could not be read."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot read {path}: {cause}")


class SubmissionError(IndexNowSyncError):
    """
    A single batch could not be delivered.

    status_code is None for transport errors (DNS, connect, timeout).
    """

    def __init__(
        self,
        batch_index: int,
        size: int,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.batch_index = batch_index
        self.size = size
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"batch {batch_index + 1} failed: {reason}")


__all__ = [
    "IndexNowSyncError",
    "ConfigError",
    "TraversalError",
    "SubmissionError",
]
