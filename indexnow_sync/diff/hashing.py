# indexnow_sync/diff/hashing.py
"""
Content fingerprints for page files.

Fingerprints have the fixed form "sha256:<lowercase hex>" and depend only
on the exact bytes of the file.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

FINGERPRINT_PREFIX = "sha256:"


def hash_bytes(data: bytes) -> str:
    """Compute the fingerprint of raw bytes."""
    return f"{FINGERPRINT_PREFIX}{hashlib.sha256(data).hexdigest()}"


def hash_file(path: str | Path) -> str:
    """
    Compute the fingerprint of a file's full contents.

    The whole file is read before hashing. OSError propagates to the caller.
    """
    return hash_bytes(Path(path).read_bytes())


__all__ = ["FINGERPRINT_PREFIX", "hash_bytes", "hash_file"]
