# topmark:header:start
#
#   project      : MkFrag
#   file         : product.py
#   file_relpath : src/mkfrag/cli/commands/product.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag `product` command.

Renders the product fragment (``<device>-vendor.mk``). Blob entries of the
document are turned into ``PRODUCT_COPY_FILES`` descriptors and appended after
the explicit ``copy_files``.
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
from mkfrag.cli.errors import MkfragConfigError
from mkfrag.cli.options import (
    CONTEXT_SETTINGS,
    document_argument,
    output_option,
    proprietary_dir_option,
)
from mkfrag.config.documents import resolve_product_makefile
from mkfrag.config.keys import Toml
from mkfrag.core.errors import DocumentError
from mkfrag.makefile.serializers import serialize_product_makefile

if TYPE_CHECKING:
    from mkfrag.makefile.model import ProductMakefile


@click.command(
    name="product",
    help="Render the product fragment (<device>-vendor.mk) of a fragment document.",
    context_settings=CONTEXT_SETTINGS,
)
@document_argument
@output_option
@proprietary_dir_option
@click.pass_context
def product_command(
    ctx: click.Context,
    *,
    document: str,
    output: str | None,
    proprietary_dir: str | None,
) -> None:
    """Render ``[product]`` of DOCUMENT ('-' reads STDIN)."""
    console = get_console(ctx)
    doc = load_document_or_exit(document, proprietary_dir=proprietary_dir)
    report_diagnostics(ctx, doc)

    require_section(doc.product, Toml.SECTION_PRODUCT, document=document)
    try:
        resolved: ProductMakefile | None = resolve_product_makefile(doc)
    except DocumentError as exc:
        raise MkfragConfigError(str(exc)) from exc
    mk: ProductMakefile = require_section(resolved, Toml.SECTION_PRODUCT, document=document)

    emit_fragment(console, serialize_product_makefile(mk), output=output)
