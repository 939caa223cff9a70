from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, permission-string parsing and destination
preparation helpers used by the pipeline before materialization.
"""

import os
import shutil
from typing import Optional, Tuple

from treegen.domain.errors import ConfigError, FilesystemError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_FILE_MODE_STR = "0o644"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# PERMISSIONS API
# -----------------------------------------------------------------------------

def parse_file_mode(value: str) -> int:
    """
    Parse an octal permission string such as '0o644', '0644' or '644'.

    Raises:
        ConfigError: If the value is not a valid octal mode.
    """
    raw = (value or "").strip().lower()
    digits = raw[2:] if raw.startswith("0o") else raw
    try:
        mode = int(digits, 8)
    except ValueError:
        raise ConfigError(f"Invalid mode format '{value}'; use octal like 0o644") from None
    if not 0 <= mode <= 0o7777:
        raise ConfigError(f"Mode '{value}' is out of range (0o0 - 0o7777)")
    return mode


def format_file_mode(mode: int) -> str:
    return f"0o{mode:o}"

# -----------------------------------------------------------------------------
# DESTINATION PREPARATION API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def clean_directory(path: str) -> bool:
    """
    Remove an existing destination directory and everything below it.

    Returns:
        bool: True if something was removed, False if the path was absent.

    Raises:
        FilesystemError: If removal fails.
    """
    if not os.path.exists(path):
        return False
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}", path, "clean") from e
    return True
