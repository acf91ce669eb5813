# indexnow_sync/submit/__init__.py
"""
IndexNow submission client.

Usage:
    from indexnow_sync.submit import BatchSubmitter

    report = BatchSubmitter().submit(urls, site_url="https://example.com", key="abc")
    print(report.succeeded, report.failed)
"""

from .submitter import (
    DEFAULT_TIMEOUT,
    INDEXNOW_BATCH_SIZE,
    INDEXNOW_ENDPOINT,
    BatchOutcome,
    BatchResult,
    BatchSubmitter,
    SubmissionReport,
    build_payload,
    chunk,
    site_host,
)

__all__ = [
    "INDEXNOW_ENDPOINT",
    "INDEXNOW_BATCH_SIZE",
    "DEFAULT_TIMEOUT",
    "chunk",
    "site_host",
    "build_payload",
    "BatchOutcome",
    "BatchResult",
    "SubmissionReport",
    "BatchSubmitter",
]
