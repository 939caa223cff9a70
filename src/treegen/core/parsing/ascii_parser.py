from __future__ import annotations

"""
ASCII Tree Parser.

Reconstructs a canonical tree from a drawing such as:

    project/
    ├── src/
    │   ├── main.rs
    │   └── lib.rs
    └── README.md

Hierarchy is inferred purely from indentation blocks and connector glyphs.
Parsing runs in two stages: every line is first scanned into a flat
(level, node) entry, then the entries are folded into a tree with an
explicit stack of arena indices.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from treegen.domain.errors import GrammarError
from treegen.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GRAMMAR
# -----------------------------------------------------------------------------

INDENT_WIDTH = 4
INDENT_UNITS = ("│   ", "    ")
BRANCH_PREFIXES = ("├── ", "└── ")
DIR_SUFFIX = "/"

# A name may not open with a drawing glyph, so malformed connectors fail
_GLYPHS = "│├└─"
LINE_RX = re.compile(
    r"^(?P<indent>(?:│   |    )*)"
    r"(?P<prefix>├── |└── )?"
    rf"(?P<name>\s*[^\s{_GLYPHS}].*)$"
)


@dataclass(frozen=True)
class TreeEntry:
    """A scanned line: its nesting level and the node it declares."""
    level: int
    node: Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_ascii_tree(lines: Iterable[str]) -> Node:
    """
    Parse drawing-style lines into a canonical tree.

    Args:
        lines: Sanitized text lines of the drawing.

    Returns:
        Node: Synthetic root whose children are the top-level entries.

    Raises:
        GrammarError: If a non-blank line does not match the line grammar.
            No partial tree is produced.
    """
    entries = scan_lines(lines)
    root = fold_entries(entries)
    logger.debug(f"Parsed ASCII tree with {len(entries)} entries.")
    return root


def scan_lines(lines: Iterable[str]) -> List[TreeEntry]:
    """Convert every non-blank line into a (level, node) entry."""
    entries: List[TreeEntry] = []
    for line in lines:
        if not line.strip():
            continue
        entries.append(parse_line(line))
    return entries


def parse_line(line: str) -> TreeEntry:
    """
    Match a single line against `indent* prefix? name`.

    The level is indent_blocks + 2 when a connector is present and
    indent_blocks + 1 otherwise. A trailing '/' marks a directory and is
    kept in the stored name.
    """
    match = LINE_RX.match(line)
    if match is None:
        raise GrammarError(f"Line '{line}' does not match the ASCII tree format", line)

    indent_blocks = len(match.group("indent")) // INDENT_WIDTH
    level = indent_blocks + (2 if match.group("prefix") else 1)

    name = match.group("name").strip()
    node = Node.directory(name) if name.endswith(DIR_SUFFIX) else Node.file(name)
    return TreeEntry(level=level, node=node)


def fold_entries(entries: List[TreeEntry]) -> Node:
    """
    Fold flat entries into a tree.

    The stack holds (level, arena index) pairs seeded with the root at
    level 0. Entries pop the stack while its top level is >= their own,
    attach to the new top, and push themselves only when they are
    directories.
    """
    arena: List[Node] = [Node.root()]
    stack: List[Tuple[int, int]] = [(0, 0)]

    for entry in entries:
        while stack[-1][0] >= entry.level:
            stack.pop()

        parent = arena[stack[-1][1]]
        parent.children.append(entry.node)
        arena.append(entry.node)

        if entry.node.is_dir:
            stack.append((entry.level, len(arena) - 1))

    return arena[0]
