# topmark:header:start
#
#   project      : MkFrag
#   file         : generate.py
#   file_relpath : src/mkfrag/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag `generate` command.

Writes every fragment present in a document into an output directory:

- ``[modules]`` -> ``Android.mk``
- ``[product]`` -> ``<device>-vendor.mk`` (needs ``[device].name``)
- ``[board]``   -> ``BoardConfigVendor.mk``

Existing files are overwritten; each fragment is rendered from scratch.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mkfrag.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_document_or_exit,
    report_diagnostics,
    write_fragment,
)
from mkfrag.cli.errors import MkfragConfigError, MkfragIOError, MkfragPermissionDeniedError
from mkfrag.cli.options import CONTEXT_SETTINGS, document_argument, proprietary_dir_option
from mkfrag.config.documents import resolve_product_makefile
from mkfrag.config.keys import Toml
from mkfrag.config.logging import get_logger
from mkfrag.constants import (
    BOARD_MAKEFILE_NAME,
    MODULES_MAKEFILE_NAME,
    PRODUCT_MAKEFILE_TEMPLATE,
)
from mkfrag.core.errors import DocumentError
from mkfrag.makefile.serializers import (
    serialize_board_makefile,
    serialize_modules_makefile,
    serialize_product_makefile,
)

if TYPE_CHECKING:
    from mkfrag.config.documents import FragmentDocument
    from mkfrag.config.logging import MkfragLogger

logger: MkfragLogger = get_logger(__name__)


def render_fragments(doc: FragmentDocument) -> dict[str, str]:
    """Render all fragments of ``doc``, keyed by file name, in modules/product/board order.

    Raises:
        DocumentError: If the product fragment cannot be resolved (missing
            device name or proprietary directory).
    """
    fragments: dict[str, str] = {}
    if doc.modules is not None:
        fragments[MODULES_MAKEFILE_NAME] = serialize_modules_makefile(doc.modules)

    product = resolve_product_makefile(doc)
    if product is not None:
        if doc.device_name is None:
            raise DocumentError(
                f"[{Toml.SECTION_PRODUCT}] output name requires "
                f"{Toml.SECTION_DEVICE}.{Toml.KEY_NAME}",
                source=doc.source,
            )
        name = PRODUCT_MAKEFILE_TEMPLATE.format(device=doc.device_name)
        fragments[name] = serialize_product_makefile(product)

    if doc.board is not None:
        fragments[BOARD_MAKEFILE_NAME] = serialize_board_makefile(doc.board)
    return fragments


@click.command(
    name="generate",
    help="Write every fragment of a fragment document into an output directory.",
    context_settings=CONTEXT_SETTINGS,
)
@document_argument
@click.option(
    "--output-dir",
    "-d",
    "output_dir",
    type=click.Path(file_okay=False),
    required=True,
    help="Directory receiving the generated fragments (created if missing).",
)
@proprietary_dir_option
@click.pass_context
def generate_command(
    ctx: click.Context,
    *,
    document: str,
    output_dir: str,
    proprietary_dir: str | None,
) -> None:
    """Write the fragments of DOCUMENT ('-' reads STDIN) into OUTPUT_DIR."""
    console = get_console(ctx)
    doc = load_document_or_exit(document, proprietary_dir=proprietary_dir)
    report_diagnostics(ctx, doc)

    try:
        fragments = render_fragments(doc)
    except DocumentError as exc:
        raise MkfragConfigError(str(exc)) from exc

    if not fragments:
        if get_effective_verbosity(ctx) >= 0:
            console.warn(
                f"{document}: no [modules], [product] or [board] section; nothing written"
            )
        return

    out_dir = Path(output_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError as exc:
        raise MkfragPermissionDeniedError(f"Permission denied: {out_dir}") from exc
    except OSError as exc:
        raise MkfragIOError(f"Cannot create {out_dir}: {exc}") from exc

    verbose: bool = get_effective_verbosity(ctx) > 0
    for name, text in fragments.items():
        path = out_dir / name
        write_fragment(path, text)
        if verbose:
            console.print(f"Wrote {path}")
