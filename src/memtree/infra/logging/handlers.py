from __future__ import annotations

"""
Logging Handlers.

Handler factories and the tagging helpers that let configure_logging tell
its own handlers apart from ones installed by the host application.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

_HANDLER_TAG_ATTR: str = "_memtree_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as owned by memtree and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Stream handler bound to stderr."""
    sh = logging.StreamHandler()
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return _tag_handler(sh)


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> RotatingFileHandler:
    """
    Build a RotatingFileHandler, creating the parent directory when needed.

    Raises:
        OSError: The log file cannot be opened.
    """
    parent = os.path.dirname(os.path.abspath(log_file))
    os.makedirs(parent, exist_ok=True)

    fh = RotatingFileHandler(
        log_file,
        maxBytes=int(max_bytes),
        backupCount=int(backup_count),
        encoding="utf-8",
    )
    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
