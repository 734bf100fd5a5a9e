# topmark:header:start
#
#   project      : MkFrag
#   file         : loaders.py
#   file_relpath : src/mkfrag/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load fragment documents from TOML sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures. tomlkit
keeps tables and keys in document order, which the product serializer relies
on for byte-stable property blocks.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mkfrag.config.logging import get_logger
from mkfrag.core.errors import DocumentError

from .guards import is_toml_table

if TYPE_CHECKING:
    from pathlib import Path

    from mkfrag.config.logging import MkfragLogger

    from .types import TomlTable

logger: MkfragLogger = get_logger(__name__)

STDIN_SOURCE: str = "<stdin>"


def parse_toml_text(text: str, *, source: str | None = None) -> TomlTable:
    """Parse TOML text into a plain, insertion-ordered table.

    Args:
        text (str): TOML document text.
        source (str | None): Label for messages (path or ``"<stdin>"``).

    Returns:
        TomlTable: The parsed document.

    Raises:
        DocumentError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", source or "<text>", exc)
        raise DocumentError(f"invalid TOML: {exc}", source=source) from exc

    data: Any = doc.unwrap()
    if not is_toml_table(data):  # pragma: no cover - tomlkit always yields a table
        raise DocumentError("document root is not a table", source=source)
    logger.trace("Parsed %s: top-level keys %s", source or "<text>", list(data))
    return data


def load_toml_document(path: Path) -> TomlTable:
    """Load and parse a TOML fragment document from the filesystem.

    Args:
        path (Path): Path to the document. Encoding is assumed to be UTF-8.

    Returns:
        TomlTable: The parsed document.

    Raises:
        DocumentError: If the file is not valid TOML.
        OSError: If the file cannot be read; callers map this to an exit code.
    """
    logger.debug("Loading fragment document %s", path)
    text: str = path.read_text(encoding="utf-8")
    return parse_toml_text(text, source=str(path))


def read_stdin_document() -> TomlTable:
    """Read and parse a TOML fragment document from STDIN."""
    logger.debug("Reading fragment document from STDIN")
    return parse_toml_text(sys.stdin.read(), source=STDIN_SOURCE)
