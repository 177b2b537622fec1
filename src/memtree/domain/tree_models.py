from __future__ import annotations

"""
In-Memory Tree Data Models.

Provides the recursive node types produced by the tree text parsers.
A Directory is a plain mapping from child name to node, so two trees can
be compared with ordinary equality.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """Leaf entry of the tree. Carries no payload."""


class Directory(Dict[str, Union["Directory", File]]):
    """
    Container entry of the tree, mapping child names to nodes.

    Every Directory owns its children; subtrees are never shared between
    two parents.
    """

    def __repr__(self) -> str:
        return f"Directory({dict.__repr__(self)})"

    def to_dict(self) -> Dict[str, Optional[Dict[str, Any]]]:
        """
        Export the subtree as nested builtin dicts.

        Returns:
            Dict: Directories as dicts, files as None.
        """
        out: Dict[str, Optional[Dict[str, Any]]] = {}
        for name, node in self.items():
            out[name] = node.to_dict() if isinstance(node, Directory) else None
        return out


Node = Union[Directory, File]
