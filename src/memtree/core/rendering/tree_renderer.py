from __future__ import annotations

"""
Tree Renderer.

Converts a MemFS back into text listings that the matching line parser
reads into an equal tree. Supports the 'tree' command layout and the
tab-indented layout.
"""

from typing import List

from memtree.core.memfs import MemFS
from memtree.domain.constants import (
    BOX_HORIZONTAL,
    INDENT_GLYPHS,
    INDENT_WIDTH,
    PATH_SEP,
    ROOT_MARKER,
    TAB_CHAR,
)
from memtree.domain.tree_models import Directory

RENDER_STYLES = ("unix", "tab")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(fs: MemFS, style: str = "unix", mark_dirs: bool = True) -> List[str]:
    """
    Render the whole tree as text lines, starting with the root marker.

    The unix layout only admits names that parse back unchanged: the
    'tree' dialect counts every space toward the depth and cuts the name
    at the last horizontal bar, so names holding three or more spaces, a
    horizontal bar or trailing whitespace are refused.

    Args:
        fs: Tree to render.
        style: "unix" for box-drawing output, "tab" for tab indentation.
        mark_dirs: Append a trailing separator to directory names, so empty
            directories survive a parse round trip.

    Returns:
        List[str]: Lines without newline terminators.

    Raises:
        ValueError: Unknown style, or a name the unix layout cannot carry.
    """
    if style not in RENDER_STYLES:
        raise ValueError(f"Unknown render style: {style!r}")

    lines: List[str] = [ROOT_MARKER]
    if style == "unix":
        _render_unix(fs.tree, lines, prefix="", mark_dirs=mark_dirs)
    else:
        _render_tab(fs.tree, lines, depth=0, mark_dirs=mark_dirs)
    return lines


def render_text(fs: MemFS, style: str = "unix", mark_dirs: bool = True) -> str:
    """Newline-terminated rendering, ready to be written or parsed."""
    return "\n".join(render_tree(fs, style=style, mark_dirs=mark_dirs)) + "\n"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_unix(directory: Directory, lines: List[str], prefix: str, mark_dirs: bool) -> None:
    """Recursively emit entries with ├──/└── connectors."""
    entries = sorted(directory.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        node = directory[entry]
        _check_unix_name(entry)

        if isinstance(node, Directory):
            lines.append(f"{prefix}{connector}{_label(entry, mark_dirs)}")
            _render_unix(node, lines, prefix + ("    " if is_last else "│   "), mark_dirs)
            continue

        lines.append(f"{prefix}{connector}{entry}")


def _render_tab(directory: Directory, lines: List[str], depth: int, mark_dirs: bool) -> None:
    indent = TAB_CHAR * depth
    for entry in sorted(directory.keys()):
        node = directory[entry]
        if isinstance(node, Directory):
            lines.append(f"{indent}{_label(entry, mark_dirs)}")
            _render_tab(node, lines, depth + 1, mark_dirs)
        else:
            lines.append(f"{indent}{entry}")


def _label(name: str, mark_dirs: bool) -> str:
    return f"{name}{PATH_SEP}" if mark_dirs else name


def _check_unix_name(name: str) -> None:
    """Refuse names whose own glyphs would shift the parsed depth or name."""
    glyphs = sum(name.count(g) for g in INDENT_GLYPHS)
    if glyphs >= INDENT_WIDTH - 1 or BOX_HORIZONTAL in name or name != name.rstrip():
        raise ValueError(f"Name cannot be rendered in the unix layout: {name!r}")
