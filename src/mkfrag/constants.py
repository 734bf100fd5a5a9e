# topmark:header:start
#
#   project      : MkFrag
#   file         : constants.py
#   file_relpath : src/mkfrag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

MKFRAG_VERSION: str = get_version("mkfrag")

# Leading comment of every generated fragment (two lines, no trailing newline).
MAKEFILE_HEADER: Final[str] = (
    "# Generated by adevtool; do not edit\n"
    "# For more info, see https://github.com/kdrag0n/adevtool"
)

# Joins the items of a continuation block: backslash-newline plus a 4-space indent.
CONT_SEPARATOR: Final[str] = " \\\n    "

# Separator between top-level blocks of a fragment.
BLOCK_SEPARATOR: Final[str] = "\n\n"

# File names written by `mkfrag generate`.
MODULES_MAKEFILE_NAME: Final[str] = "Android.mk"
PRODUCT_MAKEFILE_TEMPLATE: Final[str] = "{device}-vendor.mk"
BOARD_MAKEFILE_NAME: Final[str] = "BoardConfigVendor.mk"

# Prefix for module names derived from a symlink path.
SYMLINK_MODULE_PREFIX: Final[str] = "symlink__"

LOG_LEVEL_ENV_VAR: Final[str] = "MKFRAG_LOG_LEVEL"
