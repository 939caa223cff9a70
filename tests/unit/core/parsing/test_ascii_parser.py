from __future__ import annotations

"""
Unit tests for the ASCII Tree Parser.

Verifies level inference, directory detection, stack-based parent
tracking (including multi-level collapse) and grammar failures.
"""

from typing import List

import pytest

from treegen.core.parsing.ascii_parser import fold_entries, parse_ascii_tree, parse_line, scan_lines
from treegen.domain.errors import GrammarError
from treegen.domain.tree_models import Node, NodeKind


def _names(node: Node) -> List[str]:
    return [c.name for c in node.children]


# -----------------------------------------------------------------------------
# LINE GRAMMAR
# -----------------------------------------------------------------------------

def test_connector_at_zero_indent_is_level_two() -> None:
    entry = parse_line("├── src/")
    assert entry.level == 2
    assert entry.node.name == "src/"
    assert entry.node.kind is NodeKind.DIRECTORY


def test_plain_line_is_level_one() -> None:
    entry = parse_line("project/")
    assert entry.level == 1


def test_indent_blocks_add_levels() -> None:
    assert parse_line("│   └── main.rs").level == 3
    assert parse_line("    └── main.rs").level == 3
    assert parse_line("│   │   ├── deep.txt").level == 4
    assert parse_line("        notes.txt").level == 3


def test_name_is_trimmed_and_keeps_spaces_inside() -> None:
    entry = parse_line("└── my notes.txt   ")
    assert entry.node.name == "my notes.txt"
    assert entry.node.kind is NodeKind.FILE


def test_partial_indent_folds_into_name() -> None:
    """Two leading spaces are not an indent block; the name is trimmed."""
    entry = parse_line("  loose.txt")
    assert entry.level == 1
    assert entry.node.name == "loose.txt"


def test_trailing_slash_is_kept_in_directory_name() -> None:
    entry = parse_line("└── assets/")
    assert entry.node.name.endswith("/")
    assert entry.node.is_dir


@pytest.mark.parametrize(
    "line",
    [
        "│  broken.txt",
        "├──missing-space.txt",
        "├── ",
        "─── stray",
        "│   │",
    ],
)
def test_malformed_lines_raise_grammar_error(line: str) -> None:
    with pytest.raises(GrammarError) as exc_info:
        parse_line(line)
    assert exc_info.value.line == line
    assert line in str(exc_info.value)


# -----------------------------------------------------------------------------
# HIERARCHY RECONSTRUCTION
# -----------------------------------------------------------------------------

def test_sample_drawing_hierarchy(sample_drawing: str) -> None:
    root = parse_ascii_tree(sample_drawing.splitlines())

    assert root.name == ""
    assert _names(root) == ["project/"]

    project = root.children[0]
    assert _names(project) == ["src/", "Cargo.toml", "README.md"]
    assert _names(project.children[0]) == ["main.rs", "lib.rs"]


def test_child_attaches_to_connector_directory() -> None:
    root = parse_ascii_tree(["├── src/", "│   └── main.rs"])

    assert _names(root) == ["src/"]
    src = root.children[0]
    assert src.is_dir
    assert src.children == [Node.file("main.rs")]


def test_shallower_line_collapses_several_levels() -> None:
    lines = [
        "a/",
        "├── b/",
        "│   ├── c/",
        "│   │   └── d.txt",
        "└── e.txt",
        "f.txt",
    ]
    root = parse_ascii_tree(lines)

    assert _names(root) == ["a/", "f.txt"]
    a = root.children[0]
    assert _names(a) == ["b/", "e.txt"]
    assert _names(a.children[0]) == ["c/"]
    assert _names(a.children[0].children[0]) == ["d.txt"]


def test_files_never_receive_children() -> None:
    root = parse_ascii_tree(["├── file.txt", "│   └── orphan.txt"])

    assert _names(root) == ["file.txt", "orphan.txt"]
    assert all(not c.children for c in root.children)


def test_sibling_order_follows_input_order() -> None:
    lines = ["├── zeta.txt", "├── alpha.txt", "└── mid.txt"]
    assert _names(parse_ascii_tree(lines)) == ["zeta.txt", "alpha.txt", "mid.txt"]


def test_blank_lines_are_ignored() -> None:
    lines = ["docs/", "", "   ", "├── index.md", "\t"]
    root = parse_ascii_tree(lines)
    assert _names(root.children[0]) == ["index.md"]


def test_no_content_is_attached() -> None:
    root = parse_ascii_tree(["├── a.txt", "└── b/"])
    assert all(node.content is None for _, node in root.walk())


def test_grammar_error_returns_no_tree() -> None:
    with pytest.raises(GrammarError) as exc_info:
        parse_ascii_tree(["├── ok.txt", "│  bad.txt", "└── never.txt"])
    assert exc_info.value.line == "│  bad.txt"


def test_fold_entries_on_empty_input() -> None:
    root = fold_entries(scan_lines([]))
    assert root == Node.root()
