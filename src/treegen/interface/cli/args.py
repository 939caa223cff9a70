from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace
into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from treegen import __version__
from treegen.infra.fs import DEFAULT_FILE_MODE_STR
from treegen.utils.i18n import i18n

SUPPORTED_LANGS = ("en", "zh")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treegen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treegen",
        description=i18n.t("app.description"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # --- Inputs and Destination ---
    p.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help=i18n.t("cli.args.inputs"),
    )
    p.add_argument(
        "-o", "--out",
        dest="out_dir",
        default=None,
        help=i18n.t("cli.args.out"),
    )

    # --- Execution Behaviour ---
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    p.add_argument("-v", "--verbose", action="store_true", help=i18n.t("cli.args.verbose"))
    p.add_argument("--clean", action="store_true", help=i18n.t("cli.args.clean"))
    p.add_argument(
        "--mode",
        default=DEFAULT_FILE_MODE_STR,
        help=i18n.t("cli.args.mode"),
    )

    # --- Diagnostics ---
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))
    p.add_argument("--lang", choices=SUPPORTED_LANGS, default=None, help=i18n.t("cli.args.lang"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))

    # --- Format Selection ---
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags left at their argparse default produce no override, except for
    the always-present inputs and mode.
    """
    overrides: Dict[str, Any] = {
        "inputs": list(args.inputs),
        "mode": args.mode,
    }

    if args.out_dir:
        overrides["out_dir"] = args.out_dir
    if args.dry_run:
        overrides["dry_run"] = True
    if args.verbose:
        overrides["verbose"] = True
    if args.clean:
        overrides["clean"] = True
    if args.log_file:
        overrides["log_file"] = args.log_file

    return overrides
