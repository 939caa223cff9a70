from __future__ import annotations

"""
Tree Materializer.

Walks a canonical tree depth-first and realizes it on disk, or simulates
the same traversal without touching the filesystem (dry run). Every
visited directory and file is recorded in a report, in traversal order.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from treegen.domain.errors import FilesystemError
from treegen.domain.tree_models import Node

logger = logging.getLogger(__name__)

DRY_RUN_TAG = "[Dry-Run] "
DEFAULT_FILE_MODE = 0o644

# -----------------------------------------------------------------------------
# REPORT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FsOperation:
    """A single directory or file creation, performed or simulated."""
    kind: str
    path: str


@dataclass
class MaterializeReport:
    """
    Outcome of a materialization pass.

    Attributes:
        dry_run: Whether the pass only simulated filesystem effects.
        operations: Directory/file operations in traversal order.
        log_lines: Verbose messages emitted during the pass.
    """
    dry_run: bool
    operations: List[FsOperation] = field(default_factory=list)
    log_lines: List[str] = field(default_factory=list)

    @property
    def directories(self) -> int:
        return sum(1 for op in self.operations if op.kind == "directory")

    @property
    def files(self) -> int:
        return sum(1 for op in self.operations if op.kind == "file")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize_tree(
        base_path: str,
        node: Node,
        *,
        dry_run: bool = False,
        verbose: bool = False,
        mode: int = DEFAULT_FILE_MODE,
) -> MaterializeReport:
    """
    Realize a tree under a destination directory.

    The root node (empty name) maps onto base_path itself. Directories are
    created recursively and idempotently; files are written with their
    content (or empty) and then given the requested permission bits on
    POSIX platforms.

    Args:
        base_path: Destination directory.
        node: Tree (or subtree) to realize.
        dry_run: Simulate only, performing zero filesystem writes.
        verbose: Emit one log line per directory and file.
        mode: Permission bits applied to written files.

    Returns:
        MaterializeReport: Operations and log lines of the pass.

    Raises:
        FilesystemError: On the first directory, file or permission failure.
    """
    report = MaterializeReport(dry_run=dry_run)
    _visit(base_path, node, report, verbose, mode)
    return report

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def _visit(base: str, node: Node, report: MaterializeReport, verbose: bool, mode: int) -> None:
    path = base if node.is_root else os.path.join(base, node.name)

    if node.is_dir:
        _create_directory(path, report, verbose)
        for child in node.children:
            _visit(path, child, report, verbose, mode)
    else:
        _create_file(path, node, report, verbose, mode)


def _create_directory(path: str, report: MaterializeReport, verbose: bool) -> None:
    report.operations.append(FsOperation("directory", path))
    if verbose:
        _emit(report, f"Create directory: {path}")

    if report.dry_run:
        return

    try:
        os.makedirs(path, exist_ok=True)
    except (OSError, ValueError) as e:
        raise FilesystemError(f"Failed to create directory '{path}': {e}", path, "mkdir") from e


def _create_file(path: str, node: Node, report: MaterializeReport, verbose: bool, mode: int) -> None:
    report.operations.append(FsOperation("file", path))
    if verbose:
        _emit(report, f"Create file: {path}")

    if report.dry_run:
        return

    _ensure_parent(path)

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(node.content if node.content is not None else "")
    except (OSError, ValueError) as e:
        if node.content is None:
            msg = f"Failed to create empty file '{path}': {e}"
        else:
            msg = f"Failed to write file '{path}': {e}"
        raise FilesystemError(msg, path, "write") from e

    _apply_mode(path, mode)


def _ensure_parent(path: str) -> None:
    """Best-effort creation of the parent chain; the write reports failures."""
    parent = os.path.dirname(path)
    if not parent:
        return
    try:
        os.makedirs(parent, exist_ok=True)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not pre-create parent of '{path}': {e}")


def _apply_mode(path: str, mode: int) -> None:
    if os.name != "posix":
        return
    try:
        os.chmod(path, mode)
    except (OSError, ValueError) as e:
        raise FilesystemError(f"Failed to set permissions for '{path}': {e}", path, "chmod") from e


def _emit(report: MaterializeReport, message: str) -> None:
    line = f"{DRY_RUN_TAG}{message}" if report.dry_run else message
    report.log_lines.append(line)
    logger.info(line)
