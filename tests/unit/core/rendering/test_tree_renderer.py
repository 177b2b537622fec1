from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies the 'tree' command and tab layouts and that rendered listings
parse back into equal trees.
"""

import pytest

from memtree.core.memfs import MemFS
from memtree.core.parsing.builder import parse_tab_tree, parse_unix_tree
from memtree.core.rendering.tree_renderer import render_text, render_tree
from memtree.domain.tree_models import Directory, File


@pytest.fixture
def sample_fs() -> MemFS:
    return MemFS(Directory({
        "src": Directory({
            "main.py": File(),
            "utils": Directory({"helpers.py": File()}),
        }),
        "empty": Directory(),
        "README.md": File(),
    }))


def test_render_unix_layout(sample_fs: MemFS) -> None:
    assert render_tree(sample_fs) == [
        ".",
        "├── README.md",
        "├── empty/",
        "└── src/",
        "    ├── main.py",
        "    └── utils/",
        "        └── helpers.py",
    ]


def test_render_tab_layout_without_markers(sample_fs: MemFS) -> None:
    assert render_tree(sample_fs, style="tab", mark_dirs=False) == [
        ".",
        "README.md",
        "empty",
        "src",
        "\tmain.py",
        "\tutils",
        "\t\thelpers.py",
    ]


def test_render_vertical_bar_for_open_branches() -> None:
    fs = MemFS(Directory({"a": Directory({"x": File()}), "b": File()}))

    assert render_tree(fs, mark_dirs=False) == [".", "├── a", "│   └── x", "└── b"]


def test_render_empty_tree() -> None:
    assert render_tree(MemFS()) == ["."]


def test_render_unknown_style() -> None:
    with pytest.raises(ValueError):
        render_tree(MemFS(), style="xml")


def test_rendered_listings_parse_back(sample_fs: MemFS) -> None:
    """Both dialects reproduce the tree, including the empty directory."""
    assert parse_unix_tree(render_text(sample_fs, style="unix")) == sample_fs
    assert parse_tab_tree(render_text(sample_fs, style="tab")) == sample_fs


@pytest.mark.parametrize("name", ["p q r s", "a   b", "box─name", "trailing "])
def test_render_unix_refuses_names_that_would_not_parse_back(name: str) -> None:
    fs = MemFS(Directory({"a": Directory({"b": Directory({name: File()}), "c": File()})}))

    with pytest.raises(ValueError, match="unix layout"):
        render_tree(fs)


def test_names_with_few_spaces_parse_back() -> None:
    fs = MemFS(Directory({"a": Directory({"b": Directory({"p q r": File()}), "c": File()})}))

    assert parse_unix_tree(render_text(fs)) == fs


def test_tab_layout_carries_spaced_names() -> None:
    fs = MemFS(Directory({"a": Directory({"b": Directory({"p q r s": File()}), "c": File()})}))

    assert parse_tab_tree(render_text(fs, style="tab")) == fs
