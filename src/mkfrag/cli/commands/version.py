# topmark:header:start
#
#   project      : MkFrag
#   file         : version.py
#   file_relpath : src/mkfrag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag `version` command.

Prints the MkFrag version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from mkfrag.cli.cmd_common import get_console, get_effective_verbosity
from mkfrag.cli.options import EnumChoiceParam, OutputFormat
from mkfrag.constants import MKFRAG_VERSION


@click.command(
    name="version",
    help="Show the current version of MkFrag.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the current version of MkFrag.

    Args:
        ctx (click.Context): Current Click context.
        output_format (OutputFormat | None): Optional output format.
    """
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": MKFRAG_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# MkFrag Version\n")
        console.print(f"**MkFrag version: {MKFRAG_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("MkFrag version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(MKFRAG_VERSION, bold=True)}")
    else:
        console.print(console.styled(MKFRAG_VERSION, bold=True))
