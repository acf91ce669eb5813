# indexnow_sync/cli/errors.py
"""
Friendly error handling for CLI commands.

Known indexnow-sync errors become a single red line and exit code 1
instead of a traceback.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

import typer

from indexnow_sync.cli.ui import ui
from indexnow_sync.exceptions import ConfigError, IndexNowSyncError, TraversalError

F = TypeVar("F", bound=Callable)


def friendly_errors(func: F) -> F:
    """Wrap a Typer command so library errors exit cleanly."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            ui.error(f"Configuration error: {e}")
            raise typer.Exit(1)
        except TraversalError as e:
            ui.error(f"Could not read build output: {e}")
            ui.info("Previous cache entries were kept.")
            raise typer.Exit(1)
        except IndexNowSyncError as e:
            ui.error(str(e))
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
