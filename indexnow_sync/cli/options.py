# indexnow_sync/cli/options.py
"""
Shared CLI option handling.

The YAML config (if given) is read first; explicit flags override it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from indexnow_sync.config import IndexNowConfig, build_config, load_config_dict


def resolve_config(
    config_path: Optional[Path] = None,
    **overrides: Any,
) -> IndexNowConfig:
    """
    Merge a config file with CLI overrides.

    Overrides that are None are ignored, so unset flags never clobber
    values from the file.
    """
    data: Dict[str, Any] = load_config_dict(config_path) if config_path else {}

    for name, value in overrides.items():
        if value is None:
            continue
        if name == "log_level":
            data["logging"] = {**(data.get("logging") or {}), "level": value}
            continue
        # Drop any camelCase spelling from the file so the flag wins.
        camel = _to_camel(name)
        if camel != name:
            data.pop(camel, None)
        data[name] = value

    return build_config(data)


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


__all__ = ["resolve_config"]
