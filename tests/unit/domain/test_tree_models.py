from __future__ import annotations

"""
Unit tests for the canonical tree model and the error taxonomy.
"""

from treegen.domain.errors import GrammarError, TreegenError
from treegen.domain.tree_models import Node, NodeKind


def test_constructors() -> None:
    d = Node.directory("src/")
    f = Node.file("a.txt", "x")

    assert d.kind is NodeKind.DIRECTORY and d.children == [] and d.content is None
    assert f.kind is NodeKind.FILE and f.content == "x"
    assert Node.file("b.txt").content is None


def test_root_is_unnamed_directory() -> None:
    root = Node.root()
    assert root.is_root
    assert root.is_dir
    assert not Node.directory("x").is_root


def test_children_are_not_shared_between_instances() -> None:
    a = Node.directory("a")
    b = Node.directory("b")
    a.children.append(Node.file("f"))
    assert b.children == []


def test_walk_is_depth_first_preorder() -> None:
    root = Node.root()
    src = Node.directory("src")
    src.children.append(Node.file("main.py"))
    root.children.extend([src, Node.file("README.md")])

    assert [(d, n.name) for d, n in root.walk()] == [
        (0, ""),
        (1, "src"),
        (2, "main.py"),
        (1, "README.md"),
    ]


def test_grammar_error_with_path() -> None:
    err = GrammarError("Line 'x' does not match", "x")
    located = err.with_path("tree.md")

    assert isinstance(located, TreegenError)
    assert located.path == "tree.md"
    assert located.line == "x"
    assert str(located) == "tree.md: Line 'x' does not match"
