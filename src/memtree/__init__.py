from __future__ import annotations

"""
memtree: rebuild directory trees in memory from text listings.

Parses the output of the Unix 'tree' command, or a tab-indented listing,
into nested Directory/File nodes without touching disk.
"""

from memtree.core.materialize import materialize
from memtree.core.memfs import MemFS
from memtree.core.parsing.builder import build_tree, parse_tab_tree, parse_unix_tree
from memtree.core.parsing.strategies import (
    TAB,
    UNIX,
    FunctionLineParser,
    LineParser,
    TabTreeStrategy,
    UnixTreeStrategy,
)
from memtree.core.rendering.tree_renderer import render_text, render_tree
from memtree.domain.errors import (
    MemTreeError,
    TreePathError,
    TreeSyntaxError,
    UnexpectedEndOfInput,
)
from memtree.domain.tree_models import Directory, File, Node

__version__ = "0.1.0"

__all__ = [
    "MemFS",
    "Directory",
    "File",
    "Node",
    "LineParser",
    "FunctionLineParser",
    "UnixTreeStrategy",
    "TabTreeStrategy",
    "UNIX",
    "TAB",
    "build_tree",
    "parse_unix_tree",
    "parse_tab_tree",
    "render_tree",
    "render_text",
    "materialize",
    "MemTreeError",
    "UnexpectedEndOfInput",
    "TreeSyntaxError",
    "TreePathError",
]
