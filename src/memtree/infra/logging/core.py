from __future__ import annotations

"""
Logging Core.

Idempotent setup of the 'memtree' logger hierarchy. Only the command line
interface calls configure_logging; library code just asks for named
loggers and leaves output decisions to the host application.
"""

import logging
from typing import List

from memtree.infra.logging.config import _LEVEL_MAP, LoggingConfig
from memtree.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
)

PACKAGE_LOGGER: str = "memtree"

_CONFIGURED_FLAG_ATTR: str = "_memtree_configured"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach handlers to the package logger according to cfg.

    Repeated calls are no-ops unless force is set, in which case the
    previously installed handlers are closed and replaced.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The package logger.

    Raises:
        OSError: The configured log file cannot be opened.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    if getattr(logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return logger

    _remove_our_handlers(logger)

    level_int = _parse_level(cfg.level)
    logger.setLevel(level_int)

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        handlers.append(
            _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
        )

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, _CONFIGURED_FLAG_ATTR, True)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually __name__)."""
    return logging.getLogger(name)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to WARNING."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if _is_our_handler(h):
            logger.removeHandler(h)
            h.close()
