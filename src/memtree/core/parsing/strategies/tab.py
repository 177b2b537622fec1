from __future__ import annotations

"""
Tab-Indented Strategy.

Parses the simplified dialect where each level is indented by exactly one
tab character.
"""

from typing import Tuple

from memtree.core.parsing.strategies.base import LineParser
from memtree.domain.constants import TAB_CHAR


class TabTreeStrategy(LineParser):
    """
    Line parser for tab-indented listings.
    """

    def parse_line(self, line: str) -> Tuple[int, str]:
        """Depth is the count of leading tabs; the name is the remainder."""
        name = line.lstrip(TAB_CHAR)
        return len(line) - len(name), name


TAB = TabTreeStrategy()
