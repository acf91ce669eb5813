"""
Main indexnow-sync CLI module.

Provides the top-level `indexnow-sync` command.
"""

from indexnow_sync.cli.cli import app

__all__ = ["app"]
