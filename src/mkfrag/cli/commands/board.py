# topmark:header:start
#
#   project      : MkFrag
#   file         : board.py
#   file_relpath : src/mkfrag/cli/commands/board.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag `board` command.

Renders the board fragment (``BoardConfigVendor.mk``).
"""

from __future__ import annotations

import click

from mkfrag.cli.cmd_common import (
    emit_fragment,
    get_console,
    load_document_or_exit,
    report_diagnostics,
    require_section,
)
from mkfrag.cli.options import CONTEXT_SETTINGS, document_argument, output_option
from mkfrag.config.keys import Toml
from mkfrag.makefile.serializers import serialize_board_makefile


@click.command(
    name="board",
    help="Render the board fragment (BoardConfigVendor.mk) of a fragment document.",
    context_settings=CONTEXT_SETTINGS,
)
@document_argument
@output_option
@click.pass_context
def board_command(ctx: click.Context, *, document: str, output: str | None) -> None:
    """Render ``[board]`` of DOCUMENT ('-' reads STDIN)."""
    console = get_console(ctx)
    doc = load_document_or_exit(document)
    report_diagnostics(ctx, doc)

    mk = require_section(doc.board, Toml.SECTION_BOARD, document=document)
    emit_fragment(console, serialize_board_makefile(mk), output=output)
