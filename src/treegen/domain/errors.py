from __future__ import annotations

"""
Error Taxonomy.

Every failure raised by the parsing and materialization layers derives
from TreegenError and carries the path it relates to, so that interface
layers can report "operation + path" without re-deriving context.
"""

from typing import Optional


class TreegenError(Exception):
    """Base class for all fatal treegen failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ReadError(TreegenError):
    """The input source could not be read."""


class GrammarError(TreegenError):
    """An ASCII tree line does not match the expected line shape."""

    def __init__(self, message: str, line: str, path: Optional[str] = None):
        super().__init__(message, path)
        self.line = line

    def with_path(self, path: str) -> "GrammarError":
        """Return a copy of this error that also names the source file."""
        return GrammarError(f"{path}: {self.message}", self.line, path)


class DecodeError(TreegenError):
    """Structured text violates its format, or its shape is not name->value."""


class UnsupportedInputError(TreegenError):
    """The input file extension is not among the recognized formats."""


class FilesystemError(TreegenError):
    """Directory creation, file write or permission assignment failed."""

    def __init__(self, message: str, path: Optional[str] = None, operation: str = ""):
        super().__init__(message, path)
        self.operation = operation


class ConfigError(TreegenError):
    """A configuration value could not be interpreted."""
