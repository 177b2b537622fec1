from __future__ import annotations

"""
In-Memory Filesystem.

Wraps a root Directory and exposes the small set of path operations the
tree builder relies on: recursive directory creation and directory lookup.
Paths are always '/'-separated regardless of the host platform.
"""

import errno
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from memtree.domain.constants import PATH_SEP, ROOT_MARKER
from memtree.domain.errors import TreePathError
from memtree.domain.tree_models import Directory


@dataclass
class MemFS:
    """
    Result of a tree build: a single root Directory.

    Attributes:
        tree: Top-level directory of the filesystem.
    """
    tree: Directory = field(default_factory=Directory)

    # -------------------------------------------------------------------------
    # PATH OPERATIONS
    # -------------------------------------------------------------------------

    def make_dirs_all(self, path: str, mode: int = 0o777) -> None:
        """
        Create a directory together with all missing parents.

        Behaves like 'mkdir -p': existing directories, the root included,
        are left untouched.
        The mode is accepted for signature parity and otherwise ignored.

        Args:
            path: Slash-separated directory path.
            mode: Permission bits (unused).

        Raises:
            TreePathError: Path is blank, escapes the root, or crosses a file.
        """
        if not path.strip():
            raise TreePathError("mkdir", path, errno.EINVAL)

        current = self.tree
        for seg in _split(path, op="mkdir"):
            node = current.get(seg)
            if node is None:
                node = Directory()
                current[seg] = node
            elif not isinstance(node, Directory):
                raise TreePathError("mkdir", path, errno.ENOTDIR)
            current = node

    def lookup_directory(self, path: str) -> Directory:
        """
        Resolve a path to its Directory node.

        Args:
            path: Slash-separated directory path. "." and "" mean the root.

        Returns:
            Directory: The node found at the path.

        Raises:
            TreePathError: A segment is missing or is not a directory.
        """
        current = self.tree
        for seg in _split(path, op="lookup"):
            node = current.get(seg)
            if node is None:
                raise TreePathError("lookup", path, errno.ENOENT)
            if not isinstance(node, Directory):
                raise TreePathError("lookup", path, errno.ENOTDIR)
            current = node
        return current

    # -------------------------------------------------------------------------
    # EXPORT
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Optional[Dict[str, Any]]]:
        """Plain nested dict view of the whole tree (files map to None)."""
        return self.tree.to_dict()


def _split(path: str, op: str) -> List[str]:
    """Break a path into segments, dropping empty and '.' components."""
    segments: List[str] = []
    for seg in path.strip().split(PATH_SEP):
        if not seg or seg == ROOT_MARKER:
            continue
        if seg == "..":
            raise TreePathError(op, path, errno.EINVAL)
        segments.append(seg)
    return segments
