# indexnow_sync/logging/__init__.py
from .logger import LOG_PREFIX, configure_logging, get_logger

__all__ = ["LOG_PREFIX", "configure_logging", "get_logger"]
