from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Defaults when flags are omitted.
3. Rejection of invalid invocations.
"""

import pytest

from treegen.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_flags_are_mapped_to_overrides() -> None:
    args = parse_args([
        "tree.md", "spec.yaml",
        "-o", "out",
        "--dry-run",
        "-v",
        "--clean",
        "--mode", "0o600",
        "--log-file", "run.log",
    ])

    overrides = args_to_overrides(args)

    assert overrides == {
        "inputs": ["tree.md", "spec.yaml"],
        "out_dir": "out",
        "dry_run": True,
        "verbose": True,
        "clean": True,
        "mode": "0o600",
        "log_file": "run.log",
    }


def test_defaults_produce_minimal_overrides() -> None:
    overrides = args_to_overrides(parse_args(["tree.md"]))
    assert overrides == {"inputs": ["tree.md"], "mode": "0o644"}


def test_presentation_flags() -> None:
    args = parse_args(["a.json", "--json", "--dump-config", "--debug", "--lang", "zh"])
    assert args.json_output is True
    assert args.dump_config is True
    assert args.debug is True
    assert args.lang == "zh"


def test_at_least_one_input_is_required() -> None:
    with pytest.raises(SystemExit):
        parse_args([])


def test_unknown_language_is_rejected() -> None:
    with pytest.raises(SystemExit):
        parse_args(["a.md", "--lang", "fr"])
