# indexnow_sync/__init__.py
"""
indexnow-sync: notify IndexNow of the pages that changed in a static build.

Public API:
    from indexnow_sync import IndexNowConfig, run_indexnow_sync
"""

from indexnow_sync.config import IndexNowConfig, load_config
from indexnow_sync.exceptions import (
    ConfigError,
    IndexNowSyncError,
    SubmissionError,
    TraversalError,
)
from indexnow_sync.runner import IndexNowRunner, RunState, RunSummary, run_indexnow_sync

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "IndexNowConfig",
    "load_config",
    "IndexNowRunner",
    "RunState",
    "RunSummary",
    "run_indexnow_sync",
    "IndexNowSyncError",
    "ConfigError",
    "TraversalError",
    "SubmissionError",
]
