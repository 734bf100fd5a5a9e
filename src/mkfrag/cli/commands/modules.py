# topmark:header:start
#
#   project      : MkFrag
#   file         : modules.py
#   file_relpath : src/mkfrag/cli/commands/modules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag `modules` command.

Renders the modules fragment (``Android.mk``): radio files and one FAKE module
per symlink, guarded by the device name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

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
from mkfrag.makefile.serializers import serialize_modules_makefile

if TYPE_CHECKING:
    from mkfrag.makefile.model import ModulesMakefile


@click.command(
    name="modules",
    help="Render the modules fragment (Android.mk) of a fragment document.",
    context_settings=CONTEXT_SETTINGS,
)
@document_argument
@output_option
@click.pass_context
def modules_command(ctx: click.Context, *, document: str, output: str | None) -> None:
    """Render ``[modules]`` of DOCUMENT ('-' reads STDIN)."""
    console = get_console(ctx)
    doc = load_document_or_exit(document)
    report_diagnostics(ctx, doc)

    mk: ModulesMakefile = require_section(doc.modules, Toml.SECTION_MODULES, document=document)

    emit_fragment(console, serialize_modules_makefile(mk), output=output)
