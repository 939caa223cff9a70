from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
and validation, pipeline execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treegen.core.pipeline.engine import run_pipeline
from treegen.core.pipeline.validator import validate_config
from treegen.domain.config import CONFIG_KEYS, get_default_config
from treegen.domain.pipeline_models import PipelineResult
from treegen.infra.logging import LoggingConfig, configure_logging, get_logger
from treegen.interface.cli import args as cli_args
from treegen.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on a failed run, 2 on a missing input file,
        130 when interrupted.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.lang:
        i18n.load_locale(args.lang)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file or None),
        force=True,
    )
    logger.debug("CLI execution initiated.")

    # 3. Merge overrides and validate
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    for path in clean_conf["inputs"]:
        if not os.path.exists(path):
            msg = i18n.t("cli.errors.input_missing", path=path)
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base."""
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    if not result.ok:
        print(f"ERROR: {i18n.t('cli.errors.pipeline_fail', error=result.error)}", file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run_done"))
    else:
        print(i18n.t("cli.status.success", path=result.out_dir))


if __name__ == "__main__":
    sys.exit(main())
