# indexnow_sync/runner/__init__.py
"""
Build-triggered sync runs.

Usage:
    from indexnow_sync.config import IndexNowConfig
    from indexnow_sync.runner import run_indexnow_sync

    summary = run_indexnow_sync(
        "./dist",
        IndexNowConfig(key="abc123", site_url="https://example.com"),
    )
    print(summary)  # "pages 42, changed 3, unchanged 39, removed 0, batches 1 (ok 1, failed 0)"
"""

from .context import RunContext, resolve_out_dir, resolve_site_url
from .executor import IndexNowRunner, RunState, RunSummary, run_indexnow_sync

__all__ = [
    "RunContext",
    "resolve_out_dir",
    "resolve_site_url",
    "IndexNowRunner",
    "RunState",
    "RunSummary",
    "run_indexnow_sync",
]
