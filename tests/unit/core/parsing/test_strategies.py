from __future__ import annotations

"""
Unit tests for Line Parsing Strategies.

Verifies depth and name extraction for the 'tree' command dialect and the
tab-indented dialect, and the adaptation of plain functions.
"""

import pytest

from memtree.core.parsing.strategies import (
    TAB,
    UNIX,
    FunctionLineParser,
    LineParser,
    TabTreeStrategy,
    UnixTreeStrategy,
)
from memtree.domain.errors import TreeSyntaxError


# -----------------------------------------------------------------------------
# Unix dialect
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, depth, name",
    [
        ("└── dir", 0, "dir"),
        ("├── README.md", 0, "README.md"),
        ("    └── file.txt", 1, "file.txt"),
        ("│   ├── main.py", 1, "main.py"),
        ("│   │   └── deep.py", 2, "deep.py"),
        ("    │   └── deep.py", 2, "deep.py"),
        ("├── build/", 0, "build/"),
    ],
)
def test_unix_depth_and_name(line: str, depth: int, name: str) -> None:
    """Depth is one level per four indentation glyphs."""
    assert UNIX.parse_line(line) == (depth, name)


def test_unix_hard_spaces_count_as_indentation() -> None:
    """The 'tree' command pads with no-break spaces after vertical bars."""
    line = "│\u00a0\u00a0 └── nested.txt"
    assert UNIX.parse_line(line) == (1, "nested.txt")


def test_unix_missing_connector_is_syntax_error() -> None:
    with pytest.raises(TreeSyntaxError) as exc_info:
        UNIX.parse_line("   weird line")

    assert exc_info.value.line == "   weird line"
    assert "weird line" in str(exc_info.value)


def test_unix_missing_space_after_connector_is_syntax_error() -> None:
    with pytest.raises(TreeSyntaxError):
        UNIX.parse_line("└──name")


# -----------------------------------------------------------------------------
# Tab dialect
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, depth, name",
    [
        ("dir", 0, "dir"),
        ("\tfile.txt", 1, "file.txt"),
        ("\t\t\tdeep/", 3, "deep/"),
        ("\tname\twith\ttabs", 1, "name\twith\ttabs"),
    ],
)
def test_tab_depth_and_name(line: str, depth: int, name: str) -> None:
    assert TAB.parse_line(line) == (depth, name)


# -----------------------------------------------------------------------------
# Strategy plumbing
# -----------------------------------------------------------------------------

def test_builtin_strategies_are_line_parsers() -> None:
    assert isinstance(UNIX, UnixTreeStrategy)
    assert isinstance(TAB, TabTreeStrategy)
    assert isinstance(UNIX, LineParser)
    assert isinstance(TAB, LineParser)


def test_from_function_wraps_callable() -> None:
    """A plain function with the parse_line contract becomes a strategy."""
    def dashes(line: str):
        stripped = line.lstrip("-")
        return len(line) - len(stripped), stripped

    parser = LineParser.from_function(dashes)

    assert isinstance(parser, FunctionLineParser)
    assert parser.parse_line("--leaf") == (2, "leaf")
    assert "dashes" in repr(parser)


def test_line_parser_is_abstract() -> None:
    with pytest.raises(TypeError):
        LineParser()
