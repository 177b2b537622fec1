from __future__ import annotations

"""
Domain Constants.

Centralizes the glyphs and separators shared by the tree text parsers,
the renderer and the in-memory filesystem.
"""

from typing import Tuple

# -----------------------------------------------------------------------------
# BOX DRAWING GLYPHS (U+2500 block)
# -----------------------------------------------------------------------------

BOX_VERTICAL_RIGHT: str = "├"
BOX_HORIZONTAL: str = "─"
BOX_VERTICAL: str = "│"
BOX_UP_RIGHT: str = "└"
BOX_SPACE: str = " "
BOX_HARD_SPACE: str = "\u00a0"

# Characters counted as indentation by the 'tree' command dialect
INDENT_GLYPHS: Tuple[str, ...] = (BOX_SPACE, BOX_HARD_SPACE, BOX_VERTICAL)

# Width of a single nesting level in 'tree' output
INDENT_WIDTH: int = 4

TAB_CHAR: str = "\t"

# -----------------------------------------------------------------------------
# PATHS
# -----------------------------------------------------------------------------

PATH_SEP: str = "/"
ROOT_MARKER: str = "."
