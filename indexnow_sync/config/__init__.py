# indexnow_sync/config/__init__.py

from indexnow_sync.config.loader import build_config, load_config, load_config_dict
from indexnow_sync.config.schema import IndexNowConfig, LoggingConfig

__all__ = [
    "IndexNowConfig",
    "LoggingConfig",
    "build_config",
    "load_config",
    "load_config_dict",
]
