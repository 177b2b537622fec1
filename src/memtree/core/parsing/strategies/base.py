from __future__ import annotations

"""
Base Definitions for Line Parsing Strategies.

A line parser turns one line of tree text into its nesting depth and the
raw node name. The tree builder is generic over this single capability,
so new tree dialects only need a new strategy.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, BinaryIO, Callable, Tuple

if TYPE_CHECKING:
    from memtree.core.memfs import MemFS

# Signature shared by strategy objects and plain parsing functions
LineParseFunc = Callable[[str], Tuple[int, str]]


class LineParser(ABC):
    """
    Abstract base class for tree text dialects.
    """

    @abstractmethod
    def parse_line(self, line: str) -> Tuple[int, str]:
        """
        Extract depth and name from a single line.

        Args:
            line: Non-empty line, right-trimmed of whitespace.

        Returns:
            Tuple[int, str]: Depth relative to the root and raw node name.

        Raises:
            TreeSyntaxError: The line does not match the dialect.
        """
        pass

    def build_tree(self, stream: BinaryIO) -> MemFS:
        """
        Build an in-memory tree from a binary stream using this dialect.

        Args:
            stream: Readable binary stream holding the tree text.

        Returns:
            MemFS: The reconstructed tree.
        """
        from memtree.core.parsing.builder import build_tree

        return build_tree(stream, self)

    @staticmethod
    def from_function(func: LineParseFunc) -> LineParser:
        """
        Adapt a plain parsing function into a strategy object.

        Args:
            func: Callable with the parse_line contract.

        Returns:
            LineParser: Strategy delegating to the function.
        """
        return FunctionLineParser(func)


class FunctionLineParser(LineParser):
    """Strategy backed by a user-supplied function."""

    def __init__(self, func: LineParseFunc) -> None:
        self._func = func

    def parse_line(self, line: str) -> Tuple[int, str]:
        return self._func(line)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionLineParser({name})"
