# indexnow_sync/diff/scanner.py
"""
Site walker for generated output directories.

Walks the build output with an explicit directory stack, picks up every
index.html and turns its location into the page's public URL.

    <out>/index.html            -> https://example.com/
    <out>/blog/post/index.html  -> https://example.com/blog/post/
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from indexnow_sync.diff.hashing import hash_file
from indexnow_sync.exceptions import TraversalError
from indexnow_sync.logging import LOG_PREFIX, get_logger

logger = get_logger(__name__)

PAGE_INDEX_FILENAME = "index.html"


@dataclass(frozen=True)
class PageRecord:
    """A discovered page: public URL and content fingerprint."""

    url: str
    fingerprint: str


def page_url(site_url: str, relative_path: str) -> str:
    """
    Build the public URL for a page file.

    relative_path is the file path relative to the output root, using either
    separator style.
    """
    rel = relative_path.replace("\\", "/")
    if rel.endswith(PAGE_INDEX_FILENAME):
        rel = rel[: -len(PAGE_INDEX_FILENAME)]
    return f"{site_url}/{rel.lstrip('/')}"


class SiteWalker:
    """
    Discovers pages under an output directory.

    Directory entries are visited in sorted name order so that discovery
    order, and therefore the submission order, is stable between runs.
    Symlinks are not followed.

    Usage:
        walker = SiteWalker("/srv/site/dist", "https://example.com")
        for page in walker.walk():
            print(page.url, page.fingerprint)
    """

    def __init__(self, root: str | Path, site_url: str) -> None:
        self._root = Path(root)
        self._site_url = site_url

    def walk(self) -> Iterator[PageRecord]:
        """
        Yield a PageRecord for every index.html under the root.

        Raises:
            TraversalError: if a directory cannot be listed or a page cannot
                be read. Partial discovery is never returned silently.
        """
        stack: List[Path] = [self._root]

        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as e:
                raise TraversalError(str(current), e) from e

            subdirs: List[Path] = []
            for entry in entries:
                full_path = Path(entry.path)
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as e:
                    raise TraversalError(str(full_path), e) from e

                if is_dir:
                    subdirs.append(full_path)
                elif is_file and entry.name == PAGE_INDEX_FILENAME:
                    yield self._record(full_path)

            # Reversed so the stack pops subdirectories in name order.
            stack.extend(reversed(subdirs))

    def scan(self) -> List[PageRecord]:
        """Walk the whole tree and return the pages as a list."""
        pages = list(self.walk())
        logger.debug(f"{LOG_PREFIX} discovered {len(pages)} pages under {self._root}")
        return pages

    def _record(self, path: Path) -> PageRecord:
        relative = os.path.relpath(path, self._root)
        try:
            fingerprint = hash_file(path)
        except OSError as e:
            raise TraversalError(str(path), e) from e
        return PageRecord(url=page_url(self._site_url, relative), fingerprint=fingerprint)


def scan_site(root: str | Path, site_url: str) -> List[PageRecord]:
    """Convenience wrapper around SiteWalker.scan()."""
    return SiteWalker(root, site_url).scan()


__all__ = [
    "PAGE_INDEX_FILENAME",
    "PageRecord",
    "SiteWalker",
    "page_url",
    "scan_site",
]
