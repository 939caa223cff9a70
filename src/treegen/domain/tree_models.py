from __future__ import annotations

"""
Canonical Tree Data Models.

Provides the single node type every input parser produces and the
materializer consumes. A tree is rooted at a synthetic directory whose
name is empty, meaning "the destination directory itself".
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Classification of a tree entry, fixed at parse time."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass
class Node:
    """
    Represents a single entry in the canonical tree.

    Attributes:
        name: Path segment label. Empty only for the synthetic root.
        kind: Directory or file.
        children: Ordered child nodes (always empty for files).
        content: Optional file content. None means "create an empty file".
    """
    name: str
    kind: NodeKind
    children: List["Node"] = field(default_factory=list)
    content: Optional[str] = None

    @classmethod
    def directory(cls, name: str) -> "Node":
        """Build an empty directory node."""
        return cls(name=name, kind=NodeKind.DIRECTORY)

    @classmethod
    def file(cls, name: str, content: Optional[str] = None) -> "Node":
        """Build a file node, optionally carrying content."""
        return cls(name=name, kind=NodeKind.FILE, content=content)

    @classmethod
    def root(cls) -> "Node":
        return cls.directory("")

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_root(self) -> bool:
        return self.is_dir and self.name == ""

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "Node"]]:
        """Yield (depth, node) pairs in depth-first pre-order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)
