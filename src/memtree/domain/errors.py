from __future__ import annotations

"""
Domain Exceptions.

Every failure raised by the builder, the parsers and the in-memory
filesystem derives from MemTreeError, so callers can trap the whole
family with a single except clause.
"""

import errno
from typing import Optional


class MemTreeError(Exception):
    """Base class for all memtree failures."""


class UnexpectedEndOfInput(MemTreeError, EOFError):
    """The stream ended before the mandatory root declaration line."""

    def __init__(self, message: str = "unexpected end of input") -> None:
        super().__init__(message)


class TreeSyntaxError(MemTreeError, ValueError):
    """
    A line does not match the grammar of the active line parser.

    Attributes:
        line: The offending raw line.
    """

    def __init__(self, line: object, reason: str = "invalid syntax") -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class TreePathError(MemTreeError, OSError):
    """
    A path could not be created or resolved in the in-memory filesystem.

    Attributes:
        op: Operation that failed ("mkdir" or "lookup").
        path: Path that was being processed.
    """

    def __init__(self, op: str, path: str, code: int, detail: Optional[str] = None) -> None:
        self.op = op
        self.path = path
        super().__init__(code, detail or _describe(code))

    def __str__(self) -> str:
        return f"{self.op} {self.path}: {self.strerror}"


def _describe(code: int) -> str:
    return {
        errno.ENOENT: "no such file or directory",
        errno.ENOTDIR: "not a directory",
        errno.EINVAL: "invalid argument",
    }.get(code, "path error")
