from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Shares sample listings used across unit and integration tests.
"""

import logging
import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def unix_listing() -> bytes:
    """
    A 'tree' command listing with nested directories, siblings, an empty
    directory marked by a trailing slash and a multi-level ascent.
    """
    return (
        ".\n"
        "├── docs\n"
        "│   └── index.md\n"
        "├── src\n"
        "│   ├── pkg\n"
        "│   │   ├── core\n"
        "│   │   │   └── engine.py\n"
        "│   │   └── __init__.py\n"
        "│   └── cache/\n"
        "├── README.md\n"
        "└── setup.py\n"
    ).encode("utf-8")


@pytest.fixture
def tab_listing() -> bytes:
    """Tab-indented equivalent of unix_listing."""
    return (
        ".\n"
        "docs\n"
        "\tindex.md\n"
        "src\n"
        "\tpkg\n"
        "\t\tcore\n"
        "\t\t\tengine.py\n"
        "\t\t__init__.py\n"
        "\tcache/\n"
        "README.md\n"
        "setup.py\n"
    ).encode("utf-8")


@pytest.fixture
def expected_tree() -> dict:
    """Plain dict shape of unix_listing and tab_listing."""
    return {
        "docs": {"index.md": None},
        "src": {
            "pkg": {
                "core": {"engine.py": None},
                "__init__.py": None,
            },
            "cache": {},
        },
        "README.md": None,
        "setup.py": None,
    }


@pytest.fixture
def reset_package_logging():
    """Detach handlers installed by configure_logging before and after a test."""
    from memtree.infra.logging import PACKAGE_LOGGER
    from memtree.infra.logging.core import _CONFIGURED_FLAG_ATTR
    from memtree.infra.logging.handlers import _is_our_handler

    def _reset() -> None:
        logger = logging.getLogger(PACKAGE_LOGGER)
        for h in list(logger.handlers):
            if _is_our_handler(h):
                logger.removeHandler(h)
                h.close()
        if hasattr(logger, _CONFIGURED_FLAG_ATTR):
            delattr(logger, _CONFIGURED_FLAG_ATTR)
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
