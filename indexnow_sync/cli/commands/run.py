# indexnow_sync/cli/commands/run.py
"""
Run command - walk, diff, submit, persist.

Usage:
    indexnow-sync run ./dist --site https://example.com --key abc123
    indexnow-sync run ./dist -c indexnow.yaml --dry-run
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from indexnow_sync.cli.options import resolve_config
from indexnow_sync.cli.ui import ui
from indexnow_sync.logging import configure_logging
from indexnow_sync.runner import RunState, RunSummary, run_indexnow_sync


def command(
    out_dir: str = typer.Argument(..., help="Build output directory (path or file:// URL)."),
    site: Optional[str] = typer.Option(
        None, "--site", help="Site URL declared by the build."
    ),
    key: Optional[str] = typer.Option(
        None, "--key", "-k", envvar="INDEXNOW_KEY", help="IndexNow key."
    ),
    site_url: Optional[str] = typer.Option(
        None, "--site-url", envvar="INDEXNOW_SITE_URL", help="Override the site URL."
    ),
    cache_dir: Optional[str] = typer.Option(
        None, "--cache-dir", help="Directory for the cache file (default: project root)."
    ),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="IndexNow endpoint URL."),
    batch_size: Optional[int] = typer.Option(
        None, "--batch-size", help="Maximum URLs per request (max 10000)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds."
    ),
    disabled: bool = typer.Option(False, "--disabled", help="Skip the run entirely."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML config file."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show changes without submitting or writing the cache."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with code 2 if any batch failed."
    ),
) -> None:
    """
    Submit changed pages of a build to IndexNow.

    Examples:
        indexnow-sync run ./dist --site https://example.com --key abc123
        indexnow-sync run ./dist -c indexnow.yaml
        indexnow-sync run ./dist -c indexnow.yaml --dry-run
    """
    cfg = resolve_config(
        config,
        key=key,
        site_url=site_url,
        cache_dir=cache_dir,
        endpoint=endpoint,
        batch_size=batch_size,
        timeout=timeout,
        enabled=False if disabled else None,
        log_level=log_level,
    )
    configure_logging(cfg.logging.level)

    summary = run_indexnow_sync(out_dir, cfg, declared_site=site, dry_run=dry_run)
    _display(summary)

    if strict and not summary.ok:
        raise typer.Exit(2)


def _display(summary: RunSummary) -> None:
    if summary.state == RunState.DISABLED:
        ui.info("IndexNow sync is disabled")
        return

    lines = [
        f"Pages:     {summary.pages}",
        f"Changed:   {summary.changed}",
        f"Unchanged: {summary.unchanged}",
        f"Removed:   {summary.removed} (not submitted)",
    ]

    if summary.state == RunState.DRY_RUN:
        ui.summary_panel("\n".join(lines), title="Dry run", style="blue")
        for url in summary.diff.changed_urls:
            ui.info(url)
        return

    report = summary.report
    if report.batches:
        lines.append(
            f"Batches:   {report.batches} (ok {report.succeeded}, failed {report.failed})"
        )
    else:
        lines.append("Batches:   0 (nothing to submit)")
    lines.append(f"Cache:     {summary.cache_path}")

    style = "green" if summary.ok else "yellow"
    ui.summary_panel("\n".join(lines), title="IndexNow sync", style=style)

    for error in report.errors:
        ui.warning(str(error))
    if summary.ok:
        ui.success("Done")
