from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete treegen run:
1. Validates configuration and resolves the destination.
2. Parses every input file and merges the trees.
3. Prepares the destination (clean or ensure it exists).
4. Materializes the merged tree, or simulates it in dry-run mode.
"""

import logging
import os
from typing import Any, Dict, Optional

from treegen.core.materializer import materialize_tree
from treegen.core.parsing.loader import load_inputs
from treegen.core.pipeline.validator import validate_config
from treegen.domain.errors import FilesystemError, TreegenError
from treegen.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from treegen.infra.fs import clean_directory, normalize_path, parse_file_mode, safe_mkdir

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: Optional[bool] = None,
        verbose: Optional[bool] = None,
) -> PipelineResult:
    """
    Execute the full description-to-filesystem pipeline.

    Any failure aborts the run at the first error; nothing is retried and
    nothing already written is rolled back.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: Overrides the 'dry_run' configuration flag when given.
        verbose: Overrides the 'verbose' configuration flag when given.

    Returns:
        PipelineResult: Status, counts and log lines of the run.
    """
    logger.debug("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    if dry_run is not None:
        cfg["dry_run"] = dry_run
    if verbose is not None:
        cfg["verbose"] = verbose

    if not cfg["inputs"]:
        msg = "No input files given."
        logger.error(msg)
        return create_error_result(msg, cfg)

    out_dir = normalize_path(cfg["out_dir"], os.getcwd())
    simulate = bool(cfg["dry_run"])

    try:
        mode = parse_file_mode(cfg["mode"])

        # ---------------------------------------------------------------------
        # 2) Parse & Merge Inputs
        # ---------------------------------------------------------------------
        root = load_inputs(cfg["inputs"])

        # ---------------------------------------------------------------------
        # 3) Destination Preparation
        # ---------------------------------------------------------------------
        cleaned = _prepare_destination(
            out_dir, clean=bool(cfg["clean"]), dry_run=simulate, verbose=bool(cfg["verbose"])
        )

        # ---------------------------------------------------------------------
        # 4) Materialization
        # ---------------------------------------------------------------------
        report = materialize_tree(
            out_dir,
            root,
            dry_run=simulate,
            verbose=bool(cfg["verbose"]),
            mode=mode,
        )
    except TreegenError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), cfg, out_dir,
            summary_extra={"error_type": type(e).__name__, "error_path": e.path},
        )

    summary = {
        "out_dir": out_dir,
        "dry_run": simulate,
        "cleaned": cleaned,
        "top_level_entries": len(root.children),
        "operations": [{"kind": op.kind, "path": op.path} for op in report.operations],
    }

    logger.debug(f"Pipeline completed: {report.directories} directories, {report.files} files.")
    return create_success_result(
        cfg, out_dir, report.directories, report.files, report.log_lines, summary
    )


def _prepare_destination(out_dir: str, *, clean: bool, dry_run: bool, verbose: bool) -> bool:
    """
    Clean or create the destination directory.

    The clean notice is only reported at INFO level in verbose runs.

    Returns:
        bool: True if an existing destination was (or would be) removed.
    """
    if clean and os.path.exists(out_dir):
        level = logging.INFO if verbose else logging.DEBUG
        if dry_run:
            logger.log(level, f"[Dry-Run] Clean existing directory: {out_dir}")
            return True
        logger.log(level, f"Cleaning existing directory: {out_dir}")
        return clean_directory(out_dir)

    if not dry_run and not clean:
        ok, err = safe_mkdir(out_dir)
        if not ok:
            raise FilesystemError(
                f"Failed to create output directory '{out_dir}': {err}", out_dir, "mkdir"
            )
    return False
