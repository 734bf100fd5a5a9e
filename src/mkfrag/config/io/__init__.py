# topmark:header:start
#
#   project      : MkFrag
#   file         : __init__.py
#   file_relpath : src/mkfrag/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for fragment documents.

Re-exports the loaders, checked getters and type guards so callers can import
them from a single place.
"""

from __future__ import annotations

from .getters import (
    get_prop_value_checked,
    get_str_list_or_none_checked,
    get_string_value_or_none_checked,
    get_table_list_checked,
    get_table_or_none_checked,
)
from .guards import is_any_list, is_toml_table
from .loaders import STDIN_SOURCE, load_toml_document, parse_toml_text, read_stdin_document
from .types import TomlTable

__all__ = [
    "STDIN_SOURCE",
    "TomlTable",
    "get_prop_value_checked",
    "get_str_list_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_list_checked",
    "get_table_or_none_checked",
    "is_any_list",
    "is_toml_table",
    "load_toml_document",
    "parse_toml_text",
    "read_stdin_document",
]
