"""Utility helpers shared across the drive-audio-catalog codebase."""

from .config import AppConfig, load_config
from .logging import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "load_config",
    "configure_logging",
    "get_logger",
]
