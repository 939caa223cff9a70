from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime session state that drives a treegen run. The CLI
builds overrides on top of these defaults and the validator coerces the
merged dictionary into a trusted shape.
"""

import os
from typing import Any, Dict

from treegen.infra.fs import DEFAULT_FILE_MODE_STR

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
CONFIG_KEYS = (
    "inputs",
    "out_dir",
    "dry_run",
    "verbose",
    "clean",
    "mode",
    "log_file",
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values. The output directory
        defaults to the current working directory.
    """
    return {
        # IO Paths
        "inputs": [],
        "out_dir": os.getcwd(),

        # Execution
        "dry_run": False,
        "verbose": False,
        "clean": False,

        # Materialization
        "mode": DEFAULT_FILE_MODE_STR,

        # Diagnostics
        "log_file": "",
    }
