from __future__ import annotations

"""
Dedent Engine.

Strips the common leading indentation of a text block together with its
surrounding blank lines. Used for multi-line file contents so that the
visual nesting of the source document does not leak into written files.
"""

from typing import List

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def dedent(text: str) -> str:
    """
    Remove surrounding blank lines and the shared leading-space run.

    Only space characters count towards indentation. Lines shorter than
    the common indent (which can only be whitespace-only lines) are
    reduced to their left-stripped form instead.

    Args:
        text: Raw block of text.

    Returns:
        str: Dedented block joined with '\\n', or '' if nothing remains.
    """
    lines = _trim_blank_edges(_split_lines(text))
    if not lines:
        return ""

    min_indent = _common_indent(lines)

    out: List[str] = []
    for line in lines:
        if len(line) >= min_indent:
            out.append(line[min_indent:])
        else:
            out.append(line.lstrip())
    return "\n".join(out)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_lines(text: str) -> List[str]:
    """Split on '\\n', tolerating CRLF line endings."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    # A terminating newline does not start a new line
    if lines and lines[-1] == "" and text.endswith("\n"):
        lines.pop()
    return lines


def _trim_blank_edges(lines: List[str]) -> List[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def _common_indent(lines: List[str]) -> int:
    """Minimum count of leading spaces over non-blank lines (0 if none)."""
    counts = [len(line) - len(line.lstrip(" ")) for line in lines if line.strip()]
    return min(counts) if counts else 0
