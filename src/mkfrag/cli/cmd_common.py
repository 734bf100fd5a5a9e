# topmark:header:start
#
#   project      : MkFrag
#   file         : cmd_common.py
#   file_relpath : src/mkfrag/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the fragment commands: loading the document with
consistent error mapping, reporting diagnostics, and emitting fragments.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click

from mkfrag.cli.console import ClickConsole
from mkfrag.cli.errors import (
    MkfragConfigError,
    MkfragFileNotFoundError,
    MkfragIOError,
    MkfragPermissionDeniedError,
)
from mkfrag.config.documents import load_fragment_document
from mkfrag.config.io import STDIN_SOURCE, load_toml_document, read_stdin_document
from mkfrag.config.logging import get_logger
from mkfrag.core.errors import DocumentError

if TYPE_CHECKING:
    from mkfrag.config.documents import FragmentDocument
    from mkfrag.config.io import TomlTable
    from mkfrag.config.logging import MkfragLogger

logger: MkfragLogger = get_logger(__name__)

T = TypeVar("T")


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context, creating a plain one if absent."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (<0 = quiet, 0 = default, >0 = verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity", 0))


def load_document_or_exit(document: str, *, proprietary_dir: str | None = None) -> FragmentDocument:
    """Read and interpret a fragment document, mapping failures to CLI errors.

    Args:
        document (str): Path to the TOML document, or ``-`` for STDIN.
        proprietary_dir (str | None): Optional ``--proprietary-dir`` override.

    Returns:
        FragmentDocument: The loaded document.

    Raises:
        MkfragFileNotFoundError: If the document does not exist.
        MkfragPermissionDeniedError: If the document cannot be read due to permissions.
        MkfragIOError: For other read failures.
        MkfragConfigError: If the document is invalid.
    """
    try:
        if document == "-":
            table: TomlTable = read_stdin_document()
            source = STDIN_SOURCE
        else:
            path = Path(document)
            table = load_toml_document(path)
            source = str(path)
        return load_fragment_document(table, source=source, proprietary_dir=proprietary_dir)
    except FileNotFoundError as exc:
        raise MkfragFileNotFoundError(f"Document not found: {document}") from exc
    except PermissionError as exc:
        raise MkfragPermissionDeniedError(f"Permission denied: {document}") from exc
    except UnicodeDecodeError as exc:
        raise MkfragConfigError(f"{document}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise MkfragIOError(f"Cannot read {document}: {exc}") from exc
    except DocumentError as exc:
        raise MkfragConfigError(str(exc)) from exc


def report_diagnostics(ctx: click.Context, doc: FragmentDocument) -> None:
    """Print document diagnostics as warnings on stderr, unless ``--quiet`` is set."""
    if get_effective_verbosity(ctx) < 0:
        logger.debug("Suppressed %d diagnostic(s) in quiet mode", len(doc.diagnostics))
        return
    console = get_console(ctx)
    for diag in doc.diagnostics:
        console.warn(f"[{diag.level.value}] {diag.message}")


def write_fragment(path: Path, text: str) -> None:
    """Write a fragment to ``path`` followed by a single newline.

    Raises:
        MkfragPermissionDeniedError: If the file cannot be written due to permissions.
        MkfragIOError: For other write failures.
    """
    logger.info("Writing %s", path)
    try:
        path.write_text(f"{text}\n", encoding="utf-8")
    except PermissionError as exc:
        raise MkfragPermissionDeniedError(f"Permission denied: {path}") from exc
    except OSError as exc:
        raise MkfragIOError(f"Cannot write {path}: {exc}") from exc


def emit_fragment(console: ClickConsole, text: str, *, output: str | None) -> None:
    """Print the fragment to stdout, or write it to ``output`` when given."""
    if output is None:
        console.print(text)
    else:
        write_fragment(Path(output), text)


def require_section(value: T | None, section: str, *, document: str) -> T:
    """Return a document section, failing with a config error when it is missing."""
    if value is None:
        raise MkfragConfigError(f"{document}: no [{section}] section")
    return value
