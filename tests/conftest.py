from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for tree description files and logging cleanup.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_DRAWING = """\
project/
├── src/
│   ├── main.rs
│   └── lib.rs
├── Cargo.toml
└── README.md
"""


@pytest.fixture
def sample_drawing() -> str:
    """Return a small ASCII tree drawing with one nested directory."""
    return SAMPLE_DRAWING


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Return a helper writing a tree description file under tmp_path/specs.

    Usage: write_spec("tree.md", text) -> Path
    """
    spec_dir = tmp_path / "specs"
    spec_dir.mkdir(exist_ok=True)

    def _write(name: str, text: str) -> Path:
        path = spec_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reset_logging():
    """Detach treegen's logging handlers after a test that configured them."""
    from treegen.infra.logging import shutdown_logging

    shutdown_logging()
    yield
    shutdown_logging()
