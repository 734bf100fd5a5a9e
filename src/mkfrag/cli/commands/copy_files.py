# topmark:header:start
#
#   project      : MkFrag
#   file         : copy_files.py
#   file_relpath : src/mkfrag/cli/commands/copy_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag `copy-files` command.

Prints one ``PRODUCT_COPY_FILES`` descriptor per ``[[product.blobs]]`` entry,
one per line, for callers assembling their own product fragment.
"""

from __future__ import annotations

import click

from mkfrag.cli.cmd_common import get_console, load_document_or_exit, report_diagnostics
from mkfrag.cli.errors import MkfragConfigError
from mkfrag.cli.options import CONTEXT_SETTINGS, document_argument, proprietary_dir_option
from mkfrag.config.documents import blob_copy_files
from mkfrag.core.errors import DocumentError


@click.command(
    name="copy-files",
    help="Print the copy descriptor (<src>:<dest>) of every blob in a fragment document.",
    context_settings=CONTEXT_SETTINGS,
)
@document_argument
@proprietary_dir_option
@click.pass_context
def copy_files_command(
    ctx: click.Context,
    *,
    document: str,
    proprietary_dir: str | None,
) -> None:
    """Print copy descriptors for the blobs of DOCUMENT ('-' reads STDIN)."""
    console = get_console(ctx)
    doc = load_document_or_exit(document, proprietary_dir=proprietary_dir)
    report_diagnostics(ctx, doc)

    try:
        descriptors: list[str] = blob_copy_files(doc)
    except DocumentError as exc:
        raise MkfragConfigError(str(exc)) from exc

    for descriptor in descriptors:
        console.print(descriptor)
