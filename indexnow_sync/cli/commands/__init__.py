# indexnow_sync/cli/commands/__init__.py
"""CLI command implementations, one module per command."""
