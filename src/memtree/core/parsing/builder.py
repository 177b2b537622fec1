from __future__ import annotations

"""
Tree Builder.

Folds a line-oriented tree listing into an in-memory filesystem. Each line
is reduced to a (depth, name) pair by a pluggable LineParser; the builder
tracks the chain of open directories on a stack and reconciles every depth
change between two consecutive lines.

A node is only inserted once the following line has been parsed, because
whether it is a directory depends on the depth of that next line.
"""

import io
import logging
from typing import BinaryIO, List, Optional, Tuple, Union

from memtree.core.memfs import MemFS
from memtree.core.parsing.strategies.base import LineParseFunc, LineParser
from memtree.core.parsing.strategies.tab import TAB
from memtree.core.parsing.strategies.unix import UNIX
from memtree.domain.constants import PATH_SEP, ROOT_MARKER
from memtree.domain.errors import TreeSyntaxError, UnexpectedEndOfInput
from memtree.domain.tree_models import Directory, File, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(stream: BinaryIO, parser: Union[LineParser, LineParseFunc]) -> MemFS:
    """
    Build a MemFS from a binary stream holding a tree listing.

    The first line declares the root: "." for the top-level directory, or a
    slash-separated path that is created first and used as the root. Parsing
    stops at the first whitespace-only line or at end of stream.

    Args:
        stream: Readable binary stream, consumed synchronously.
        parser: Strategy object or plain function extracting (depth, name).

    Returns:
        MemFS: The fully constructed tree.

    Raises:
        UnexpectedEndOfInput: The root declaration line is missing.
        TreeSyntaxError: A line is rejected by the parser or is not UTF-8.
        TreePathError: The declared root path cannot be created or resolved.
    """
    strategy = parser if isinstance(parser, LineParser) else LineParser.from_function(parser)
    fs = MemFS()

    # 1. Mandatory root declaration
    raw = stream.readline()
    if not raw or not raw.endswith(b"\n"):
        raise UnexpectedEndOfInput()

    root = fs.tree
    root_path = _decode(raw).strip()
    if root_path != ROOT_MARKER:
        fs.make_dirs_all(root_path, 0)
        root = fs.lookup_directory(root_path)

    # 2. Body: every node is inserted one iteration late
    stack: List[Directory] = [root]
    prev: Optional[Tuple[int, str]] = None
    count = 0

    while True:
        raw = stream.readline()
        line = _decode(raw).rstrip()
        if not line:
            if raw:
                # Trailing content after a blank line is discarded
                stream.read()
            break

        depth, name = strategy.parse_line(line)
        if prev is not None:
            _fold(stack, prev, depth)
        prev = (depth, name)
        count += 1

    # 3. Flush the last buffered node
    if prev is not None:
        name, node = _classify(prev[1])
        stack[-1][name] = node

    logger.debug(
        f"Built tree rooted at '{root_path}' from {count} entries "
        f"using {type(strategy).__name__}"
    )
    return fs


def parse_unix_tree(data: Union[bytes, str]) -> MemFS:
    """
    Build a MemFS from 'tree' command output held in memory.

    Example:
        .
        └── dir
            └── file.txt

        parses to MemFS(tree=Directory({'dir': Directory({'file.txt': File()})})).
    """
    return UNIX.build_tree(_as_stream(data))


def parse_tab_tree(data: Union[bytes, str]) -> MemFS:
    """Build a MemFS from a tab-indented listing held in memory."""
    return TAB.build_tree(_as_stream(data))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _fold(stack: List[Directory], prev: Tuple[int, str], depth: int) -> None:
    """
    Insert the buffered node and move the stack to the depth of the new line.

    Descending turns the buffered node into a fresh directory that becomes
    the top of the stack. Ascending pops one directory per level, never
    removing the root.
    """
    prev_depth, prev_name = prev
    current = stack[-1]
    name, node = _classify(prev_name)

    if depth > prev_depth:
        child = Directory()
        current[name] = child
        stack.append(child)
        return

    current[name] = node
    if depth == prev_depth:
        return

    keep = len(stack) - (prev_depth - depth)
    if keep < 1:
        logger.warning(
            f"Ascent from depth {prev_depth} to {depth} passes the root; "
            f"reparenting under the root"
        )
        keep = 1
    del stack[keep:]


def _classify(raw_name: str) -> Tuple[str, Node]:
    """A trailing separator marks a directory; anything else is a file."""
    if raw_name.endswith(PATH_SEP):
        return raw_name.rstrip(PATH_SEP), Directory()
    return raw_name, File()


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TreeSyntaxError(raw, "invalid utf-8") from e


def _as_stream(data: Union[bytes, str]) -> BinaryIO:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return io.BytesIO(data)
