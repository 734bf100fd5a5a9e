# topmark:header:start
#
#   project      : MkFrag
#   file         : test_logging_flags.py
#   file_relpath : tests/cli/test_logging_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: verbosity, quietness and color flags.

Ensures that `-v`/`-vvv` and `-q`/`-qq` parse, that combining them is a usage
error, and that a bare invocation prints help.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from mkfrag.cli.options import resolve_verbosity
from mkfrag.config.logging import TRACE_LEVEL
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_verbose_and_quiet_flags_parse() -> None:
    """It should accept verbosity and quietness flags and exit with code 0."""
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"], ["-qq", "version"]):
        result: Result = run_cli(args)

        assert_SUCCESS(result)


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_color_always_styles_version() -> None:
    result: Result = run_cli(["--color", "always", "version"])

    assert_SUCCESS(result)
    assert "\x1b[" in result.stdout


def test_no_color_wins_over_color_always() -> None:
    result: Result = run_cli(["--color", "always", "--no-color", "version"])

    assert_SUCCESS(result)
    assert "\x1b[" not in result.stdout


def test_no_subcommand_prints_hint_and_help() -> None:
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert result.stdout.startswith("Hint: use 'mkfrag generate")
    assert "Commands:" in result.stdout
    for name in ("board", "copy-files", "generate", "modules", "product", "version"):
        assert name in result.stdout


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity_levels(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected
