# indexnow_sync/cli/commands/diff.py
"""
Diff command - show what the next run would submit.

Read-only: no key needed, nothing submitted, cache untouched.

Usage:
    indexnow-sync diff ./dist --site https://example.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from indexnow_sync.cache import CacheStore, resolve_cache_path
from indexnow_sync.cli.options import resolve_config
from indexnow_sync.cli.ui import ui
from indexnow_sync.diff import compute_diff, scan_site
from indexnow_sync.logging import configure_logging
from indexnow_sync.runner import resolve_out_dir, resolve_site_url


def command(
    out_dir: str = typer.Argument(..., help="Build output directory."),
    site: Optional[str] = typer.Option(None, "--site", help="Site URL declared by the build."),
    site_url: Optional[str] = typer.Option(
        None, "--site-url", envvar="INDEXNOW_SITE_URL", help="Override the site URL."
    ),
    cache_dir: Optional[str] = typer.Option(None, "--cache-dir", help="Cache directory."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    show_unchanged: bool = typer.Option(
        False, "--unchanged", help="Also list unchanged pages."
    ),
) -> None:
    """
    Show changed, unchanged and removed pages against the cache.
    """
    cfg = resolve_config(config, site_url=site_url, cache_dir=cache_dir)
    configure_logging(cfg.logging.level)

    site_base = resolve_site_url(cfg.site_url, site)
    cache_path = resolve_cache_path(cfg.cache_dir)

    pages = scan_site(resolve_out_dir(out_dir), site_base)
    diff = compute_diff(pages, CacheStore(cache_path).load())

    ui.header("indexnow-sync diff", str(cache_path))

    rows = [[url, "changed"] for url in diff.changed_urls]
    if show_unchanged:
        rows.extend([url, "unchanged"] for url in diff.unchanged_urls)
    rows.extend([url, "removed"] for url in diff.removed_urls)

    if rows:
        ui.table(["URL", "State"], rows)
    ui.info(diff.summary)
