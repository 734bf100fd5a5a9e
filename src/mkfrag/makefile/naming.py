# topmark:header:start
#
#   project      : MkFrag
#   file         : naming.py
#   file_relpath : src/mkfrag/makefile/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module name sanitizing."""

from __future__ import annotations

import posixpath
import re

# Lowercase-only allow-list: uppercase letters are replaced as well.
_UNSAFE_CHARS_RE: re.Pattern[str] = re.compile(r"[^a-z0-9_\-.]")


def sanitize_basename(path: str) -> str:
    """Return the basename of ``path`` with every char outside ``[a-z0-9_.-]`` replaced by ``_``.

    The result is idempotent: sanitizing it again returns the same string.

    Examples:
        >>> sanitize_basename("vendor/lib/libFoo@1.0.so")
        'lib_oo_1.0.so'
    """
    # Trailing slashes name the last directory, not an empty component
    return _UNSAFE_CHARS_RE.sub("_", posixpath.basename(path.rstrip("/")))
