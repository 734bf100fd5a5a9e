# topmark:header:start
#
#   project      : MkFrag
#   file         : getters.py
#   file_relpath : src/mkfrag/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for fragment document tables.

Each getter validates the expected shape of a single key. A value of the wrong
type is reported as a **warning** in a `DiagnosticLog` (and logged), and the
getter falls back to "absent". Missing keys are never reported here; whether a
key is required is decided by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from mkfrag.config.logging import get_logger

from .guards import is_any_list, is_toml_table

if TYPE_CHECKING:
    from mkfrag.config.logging import MkfragLogger
    from mkfrag.core.diagnostics import DiagnosticLog

    from .types import TomlTable

logger: MkfragLogger = get_logger(__name__)


def _warn_type(
    where: str,
    key: str,
    expected: str,
    value: Any,
    diagnostics: DiagnosticLog,
) -> None:
    loc: Final[str] = f"{where}.{key}" if where else key
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value}")


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Dotted location of ``table`` used in messages.
        diagnostics (DiagnosticLog): Log receiving type warnings.

    Returns:
        str | None: The string value, or ``None`` when absent or mistyped.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _warn_type(where, key, "string", value, diagnostics)
    return None


def get_str_list_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Return an optional list of strings.

    A present-but-empty list is returned as ``[]`` (it is *not* collapsed to
    ``None``). Non-string items are dropped with a warning; a non-list value is
    reported and treated as absent.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Dotted location of ``table`` used in messages.
        diagnostics (DiagnosticLog): Log receiving type warnings.

    Returns:
        list[str] | None: The string items in document order, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not is_any_list(value):
        _warn_type(where, key, "array of strings", value, diagnostics)
        return None

    items: list[str] = []
    for idx, item in enumerate(value):
        if isinstance(item, str):
            items.append(item)
        else:
            _warn_type(where, f"{key}[{idx}]", "string", item, diagnostics)
    return items


def get_table_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> TomlTable | None:
    """Return an optional sub-table, warning when present but not a table."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if is_toml_table(value):
        return value
    _warn_type(where, key, "table", value, diagnostics)
    return None


def get_table_list_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[TomlTable]:
    """Return an array of tables (``[[key]]``), dropping non-table items with a warning."""
    value: Any | None = table.get(key)
    if value is None:
        return []
    if not is_any_list(value):
        _warn_type(where, key, "array of tables", value, diagnostics)
        return []

    tables: list[TomlTable] = []
    for idx, item in enumerate(value):
        if is_toml_table(item):
            tables.append(item)
        else:
            _warn_type(where, f"{key}[{idx}]", "table", item, diagnostics)
    return tables


def get_prop_value_checked(
    value: Any,
    *,
    where: str,
    key: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Render a scalar TOML value as a system property value.

    Strings are kept verbatim, booleans become ``true``/``false`` and integers
    are written in decimal (``0x10`` becomes ``16``). Floats, arrays, tables
    and dates are reported and skipped: their TOML spelling is lost on parsing
    (``1e3`` would become ``1000.0``), so such values must be quoted.

    Returns:
        str | None: The property value, or ``None`` when the value is skipped.
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    _warn_type(where, key, "string, boolean or integer property value", value, diagnostics)
    return None
