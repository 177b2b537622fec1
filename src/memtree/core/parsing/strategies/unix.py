from __future__ import annotations

"""
Unix 'tree' Command Strategy.

Parses the box-drawing output of the 'tree' command, e.g.:

    .
    ├── dir
    │   └── file.txt
    └── README.md
"""

from typing import Tuple

from memtree.core.parsing.strategies.base import LineParser
from memtree.domain.constants import BOX_HORIZONTAL, BOX_SPACE, INDENT_GLYPHS, INDENT_WIDTH
from memtree.domain.errors import TreeSyntaxError


class UnixTreeStrategy(LineParser):
    """
    Line parser for 'tree' command output.
    """

    def parse_line(self, line: str) -> Tuple[int, str]:
        """
        Compute depth from indentation glyphs and cut the name after the connector.

        Depth is the number of spaces, no-break spaces and vertical bars
        divided by the fixed level width of the 'tree' command. The name is
        whatever follows the first space after the last horizontal bar.

        Args:
            line: Non-empty, right-trimmed line.

        Returns:
            Tuple[int, str]: Depth and node name.

        Raises:
            TreeSyntaxError: Connector or the space after it is missing.
        """
        depth = sum(line.count(glyph) for glyph in INDENT_GLYPHS) // INDENT_WIDTH

        n = line.rfind(BOX_HORIZONTAL)
        if n == -1:
            raise TreeSyntaxError(line)

        region = line[n:]
        n = region.find(BOX_SPACE)
        if n == -1:
            raise TreeSyntaxError(line)

        return depth, region[n + 1:]


UNIX = UnixTreeStrategy()
