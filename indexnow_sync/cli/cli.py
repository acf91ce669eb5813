# indexnow_sync/cli/cli.py
"""
Main indexnow-sync CLI.

Commands:
- run: walk the build output, submit changed pages, update the cache
- diff: show what would be submitted (read-only)
- clear-cache: delete the cache file
"""

from __future__ import annotations

import typer

from indexnow_sync.cli.errors import friendly_errors

app = typer.Typer(
    help="indexnow-sync - submit changed static-site pages to IndexNow",
    no_args_is_help=True,
)


# Import and register commands AFTER app creation to avoid circular imports
def _register_commands() -> None:
    from indexnow_sync.cli.commands import clear_cache, diff, run

    app.command("run")(friendly_errors(run.command))
    app.command("diff")(friendly_errors(diff.command))
    app.command("clear-cache")(friendly_errors(clear_cache.command))


_register_commands()


if __name__ == "__main__":
    app()
