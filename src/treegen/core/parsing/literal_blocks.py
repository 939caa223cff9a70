from __future__ import annotations

"""
Literal-Block Preprocessor.

Scans raw structured text for backtick-delimited multi-line literals and
dedents their bodies before the text reaches the structured decoder, so
that file contents do not inherit the document's own nesting.
"""

import json
from typing import Callable, List

from treegen.core.processing.dedent import dedent

LITERAL_DELIMITER = "`"

# Receives a dedented body and returns the text that replaces the literal
LiteralRenderer = Callable[[str], str]

# -----------------------------------------------------------------------------
# RENDERERS
# -----------------------------------------------------------------------------

def render_backtick(body: str) -> str:
    """Re-emit the body between backtick delimiters."""
    return f"{LITERAL_DELIMITER}{body}{LITERAL_DELIMITER}"


def render_quoted(body: str) -> str:
    """Re-emit the body as a double-quoted string literal (JSON escaping)."""
    return json.dumps(body, ensure_ascii=False)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def preprocess_literal_blocks(text: str, render: LiteralRenderer = render_backtick) -> str:
    """
    Dedent the body of every backtick literal in the text.

    Characters outside delimiter pairs pass through unchanged. An opening
    delimiter without a closing one consumes the rest of the input as
    its body.

    Args:
        text: Raw document text.
        render: Strategy that re-emits each dedented body.

    Returns:
        str: Text with every literal body alignment-normalized.
    """
    out: List[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch != LITERAL_DELIMITER:
            out.append(ch)
            i += 1
            continue

        end = text.find(LITERAL_DELIMITER, i + 1)
        if end == -1:
            end = n
        out.append(render(dedent(text[i + 1:end])))
        i = end + 1

    return "".join(out)
