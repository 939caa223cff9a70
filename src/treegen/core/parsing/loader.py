from __future__ import annotations

"""
Input Loader.

Dispatches each input file to the right parser by extension, reads its
text and merges the resulting trees under a single synthetic root.
"""

import logging
import os
from typing import Dict, Iterable, List, Sequence

from treegen.core.parsing.ascii_parser import parse_ascii_tree
from treegen.core.parsing.structured import parse_structured
from treegen.domain.errors import GrammarError, ReadError, UnsupportedInputError
from treegen.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FORMAT REGISTRY
# -----------------------------------------------------------------------------

ASCII_FORMAT = "ascii"

EXTENSION_FORMATS: Dict[str, str] = {
    ".md": ASCII_FORMAT,
    ".txt": ASCII_FORMAT,
    ".tree": ASCII_FORMAT,
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
    ".toml": "toml",
    ".json5": "json5",
}

CODE_FENCE = "```"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def supported_extensions() -> List[str]:
    return sorted(EXTENSION_FORMATS)


def detect_format(path: str) -> str:
    """
    Resolve the input format from the file extension.

    Raises:
        UnsupportedInputError: If the extension is not recognized.
    """
    ext = os.path.splitext(path)[1].lower()
    fmt = EXTENSION_FORMATS.get(ext)
    if fmt is None:
        raise UnsupportedInputError(
            f"Unsupported file extension '{ext or '(none)'}' for '{path}'. "
            f"Expected one of: {', '.join(supported_extensions())}",
            path,
        )
    return fmt


def read_source(path: str) -> str:
    """
    Read an input file as UTF-8 text.

    Raises:
        ReadError: If the file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Failed to read input file '{path}': {e}", path) from e


def sanitize_ascii_lines(text: str) -> List[str]:
    """
    Prepare drawing text for the ASCII parser.

    Replaces ':' with '_' so names stay valid path segments, and drops
    Markdown code-fence lines surrounding an embedded drawing.
    """
    lines: List[str] = []
    for line in text.splitlines():
        if line.strip().startswith(CODE_FENCE):
            continue
        lines.append(line.replace(":", "_"))
    return lines


def load_tree(path: str) -> Node:
    """Read and parse a single input file into a canonical tree."""
    fmt = detect_format(path)
    text = read_source(path)
    logger.debug(f"Parsing '{path}' as {fmt}")

    if fmt == ASCII_FORMAT:
        try:
            return parse_ascii_tree(sanitize_ascii_lines(text))
        except GrammarError as e:
            raise e.with_path(path) from e

    return parse_structured(text, fmt, source=path)


def merge_trees(roots: Iterable[Node]) -> Node:
    """
    Concatenate the children of several roots under one synthetic root.

    Entries sharing a name are all kept; the last one written wins on disk.
    """
    merged = Node.root()
    for root in roots:
        merged.children.extend(root.children)
    return merged


def load_inputs(paths: Sequence[str]) -> Node:
    """
    Load every input in order and merge them.

    All extensions are validated before the first file is read.
    """
    for path in paths:
        detect_format(path)

    trees = [load_tree(path) for path in paths]
    merged = merge_trees(trees)
    logger.debug(f"Loaded {len(paths)} input file(s) with {len(merged.children)} top-level entries.")
    return merged
