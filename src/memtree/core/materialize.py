from __future__ import annotations

"""
On-Disk Materializer.

Writes a MemFS to a real directory: every Directory becomes a folder and
every File an empty file. Used when a fixture has to exist on disk.
"""

import errno
import logging
import os
from typing import List

from memtree.core.memfs import MemFS
from memtree.domain.constants import PATH_SEP
from memtree.domain.errors import TreePathError
from memtree.domain.tree_models import Directory

logger = logging.getLogger(__name__)


def materialize(fs: MemFS, target_dir: str) -> List[str]:
    """
    Create the tree under target_dir.

    Missing directories are created; existing files keep their content.

    Args:
        fs: Tree to write.
        target_dir: Destination directory, created if missing.

    Returns:
        List[str]: Created entries relative to target_dir, '/'-separated, sorted.

    Raises:
        TreePathError: An entry name would resolve outside target_dir.
        OSError: Propagated from the filesystem.
    """
    base = os.path.realpath(target_dir)
    os.makedirs(base, exist_ok=True)

    created: List[str] = []
    _write_directory(fs.tree, base, "", created)
    created.sort()

    logger.info(f"Materialized {len(created)} entries under: {base}")
    return created


def _write_directory(directory: Directory, abs_dir: str, rel_dir: str, created: List[str]) -> None:
    for name, node in directory.items():
        rel_path = f"{rel_dir}/{name}" if rel_dir else name
        abs_path = _safe_join(abs_dir, name, rel_path)

        if isinstance(node, Directory):
            if not os.path.isdir(abs_path):
                os.makedirs(abs_path, exist_ok=True)
                created.append(rel_path)
            _write_directory(node, abs_path, rel_path, created)
            continue

        if not os.path.exists(abs_path):
            open(abs_path, "a", encoding="utf-8").close()
            created.append(rel_path)


def _safe_join(abs_dir: str, name: str, rel_path: str) -> str:
    """Join a single entry name, refusing anything that leaves abs_dir."""
    if (
        not name
        or name in (".", "..")
        or PATH_SEP in name
        or os.sep in name
        or os.path.isabs(name)
    ):
        raise TreePathError("materialize", rel_path, errno.EINVAL)

    abs_path = os.path.realpath(os.path.join(abs_dir, name))
    if os.path.commonpath([abs_dir, abs_path]) != abs_dir:
        raise TreePathError("materialize", rel_path, errno.EINVAL)
    return abs_path
