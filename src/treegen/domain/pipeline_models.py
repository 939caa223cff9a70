from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the pipeline engine to the
interface layer, plus factories for the success and failure cases.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of a complete treegen run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        out_dir: Absolute destination directory.
        inputs: Input files in processing order.
        dry_run: Whether filesystem effects were only simulated.
        verbose: Whether per-entry log lines were emitted.
        mode: File permission string applied to created files.
        directories: Number of directories created or simulated.
        files: Number of files created or simulated.
        log_lines: Verbose materialization messages.
        summary: Additional execution details.
    """
    ok: bool
    error: str

    out_dir: str
    inputs: List[str] = field(default_factory=list)

    dry_run: bool = False
    verbose: bool = False
    mode: str = ""

    directories: int = 0
    files: int = 0
    log_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        out_dir: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        out_dir: Resolved destination, if known.
        summary_extra: Additional metadata for the summary payload.
    """
    return PipelineResult(
        ok=False,
        error=error,
        out_dir=out_dir or cfg.get("out_dir", ""),
        inputs=list(cfg.get("inputs", [])),
        dry_run=bool(cfg.get("dry_run", False)),
        verbose=bool(cfg.get("verbose", False)),
        mode=cfg.get("mode", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        out_dir: str,
        directories: int,
        files: int,
        log_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result.

    Args:
        cfg: Final configuration used during execution.
        out_dir: Absolute destination directory.
        directories: Directory operations performed or simulated.
        files: File operations performed or simulated.
        log_lines: Verbose messages from the materializer.
        summary_extra: Final execution metrics.
    """
    return PipelineResult(
        ok=True,
        error="",
        out_dir=out_dir,
        inputs=list(cfg.get("inputs", [])),
        dry_run=bool(cfg.get("dry_run", False)),
        verbose=bool(cfg.get("verbose", False)),
        mode=cfg.get("mode", ""),
        directories=directories,
        files=files,
        log_lines=log_lines or [],
        summary=summary_extra or {},
    )
