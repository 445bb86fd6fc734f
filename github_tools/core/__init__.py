"""Core infrastructure utilities."""

from .config import ToolsSettings, get_settings
from .logging_config import configure_logging, get_logger

__all__ = [
    "ToolsSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
