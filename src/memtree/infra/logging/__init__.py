from __future__ import annotations

from .config import LoggingConfig
from .core import PACKAGE_LOGGER, configure_logging, get_logger

__all__ = [
    "LoggingConfig",
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
]
