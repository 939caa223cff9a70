from __future__ import annotations

"""
Unit tests for the Dedent Engine.

Verifies common-indent removal, blank-edge trimming, handling of short
whitespace-only lines and idempotency.
"""

import pytest

from treegen.core.processing.dedent import dedent


def test_uniform_indent_is_removed() -> None:
    block = "\n    alpha\n    beta\n"
    assert dedent(block) == "alpha\nbeta"


def test_relative_alignment_is_preserved() -> None:
    block = "\n        fn main() {\n            run();\n        }\n    "
    assert dedent(block) == "fn main() {\n    run();\n}"


def test_surrounding_blank_lines_are_trimmed() -> None:
    block = "\n\n   \n  text\n\n  \t\n"
    assert dedent(block) == "text"


def test_interior_blank_lines_are_kept() -> None:
    assert dedent("    a\n\n    b") == "a\n\nb"


def test_short_whitespace_line_is_stripped() -> None:
    """A whitespace-only line shorter than the common indent becomes empty."""
    assert dedent("    a\n  \n    b") == "a\n\nb"


def test_long_whitespace_line_keeps_remainder() -> None:
    assert dedent("    a\n      \n    b") == "a\n  \nb"


@pytest.mark.parametrize("block", ["", "\n", "   ", "\n  \n\t\n"])
def test_blank_input_yields_empty_string(block: str) -> None:
    assert dedent(block) == ""


def test_only_spaces_count_as_indent() -> None:
    block = "\tx\n    y"
    assert dedent(block) == "\tx\n    y"


def test_crlf_line_endings() -> None:
    assert dedent("  a\r\n    b\r\n") == "a\n  b"


def test_no_indent_is_identity() -> None:
    assert dedent("[package]\nname = \"demo\"") == "[package]\nname = \"demo\""


@pytest.mark.parametrize(
    "block",
    [
        "\n    a\n      b\n    c\n",
        "  x\n\n      y\n   \n  z",
        "\tx\n    y",
        "  \n\n",
        "single",
    ],
)
def test_dedent_is_idempotent(block: str) -> None:
    once = dedent(block)
    assert dedent(once) == once
