# topmark:header:start
#
#   project      : MkFrag
#   file         : main.py
#   file_relpath : src/mkfrag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag CLI entry point.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import logging

import click

from mkfrag.cli.commands.board import board_command
from mkfrag.cli.commands.copy_files import copy_files_command
from mkfrag.cli.commands.generate import generate_command
from mkfrag.cli.commands.modules import modules_command
from mkfrag.cli.commands.product import product_command
from mkfrag.cli.commands.version import version_command
from mkfrag.cli.console import ClickConsole
from mkfrag.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from mkfrag.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli = resolve_verbosity(verbose, quiet)
    # -1 = quiet, 0 = default, 1+ = verbose program output
    ctx.obj["verbosity"] = (logging.WARNING - level_cli) // 10

    # Internal logging follows MKFRAG_LOG_LEVEL, independent of -v/-q
    level_env = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="MkFrag: render Android vendor make fragments from TOML documents.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the MkFrag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'mkfrag generate DOCUMENT -d OUTPUT_DIR' to write fragments.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(modules_command)

cli.add_command(product_command)

cli.add_command(board_command)

cli.add_command(copy_files_command)

cli.add_command(generate_command)

if __name__ == "__main__":
    cli()
