# indexnow_sync/diff/__init__.py
"""
Content-hash based change detection for generated sites.

Key components:
- hashing: file fingerprints ("sha256:<hex>")
- scanner: walks the output directory and yields PageRecords
- differ: compares the walk with the cached fingerprints

Usage:
    from indexnow_sync.diff import compute_diff, scan_site

    pages = scan_site("./dist", "https://example.com")
    diff = compute_diff(pages, previous_cache)
    print(diff.summary)  # "changed=3, unchanged=40, removed=1"
"""

from .differ import ChangeDetector, DiffResult, compute_diff
from .hashing import FINGERPRINT_PREFIX, hash_bytes, hash_file
from .scanner import PAGE_INDEX_FILENAME, PageRecord, SiteWalker, page_url, scan_site

__all__ = [
    # Hashing
    "FINGERPRINT_PREFIX",
    "hash_bytes",
    "hash_file",
    # Scanner
    "PAGE_INDEX_FILENAME",
    "PageRecord",
    "SiteWalker",
    "page_url",
    "scan_site",
    # Differ
    "ChangeDetector",
    "DiffResult",
    "compute_diff",
]
