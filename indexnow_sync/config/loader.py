# indexnow_sync/config/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from indexnow_sync.config.schema import IndexNowConfig
from indexnow_sync.exceptions import ConfigError


def load_config_dict(path: str | Path) -> Dict[str, Any]:
    """Read a YAML config file into a dict. An empty file yields {}."""
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def build_config(data: Dict[str, Any]) -> IndexNowConfig:
    """Validate a raw options dict."""
    try:
        return IndexNowConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: str | Path) -> IndexNowConfig:
    """Load and validate a YAML config file."""
    return build_config(load_config_dict(path))
