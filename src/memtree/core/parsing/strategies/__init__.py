from __future__ import annotations

from .base import FunctionLineParser, LineParseFunc, LineParser
from .tab import TAB, TabTreeStrategy
from .unix import UNIX, UnixTreeStrategy

__all__ = [
    "LineParser",
    "LineParseFunc",
    "FunctionLineParser",
    "UnixTreeStrategy",
    "TabTreeStrategy",
    "UNIX",
    "TAB",
]
