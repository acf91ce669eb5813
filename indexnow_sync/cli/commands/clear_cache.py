# indexnow_sync/cli/commands/clear_cache.py
"""
Clear-cache command - forget every fingerprint.

The next run treats every page as new and submits all of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from indexnow_sync.cache import CacheStore, resolve_cache_path
from indexnow_sync.cli.options import resolve_config
from indexnow_sync.cli.ui import ui


def command(
    cache_dir: Optional[str] = typer.Option(None, "--cache-dir", help="Cache directory."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
) -> None:
    """Delete the cache file."""
    cfg = resolve_config(config, cache_dir=cache_dir)
    store = CacheStore(resolve_cache_path(cfg.cache_dir))

    if store.clear():
        ui.success(f"Removed {store.path}")
    else:
        ui.info(f"No cache file at {store.path}")
