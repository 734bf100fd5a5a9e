# topmark:header:start
#
#   project      : MkFrag
#   file         : __init__.py
#   file_relpath : src/mkfrag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag package.

MkFrag turns structured vendor build configuration (symlinks, copied blobs,
per-partition properties, A/B partition lists) into Android make fragments.
The serializers are pure and deterministic; a small CLI reads TOML documents
and writes the rendered fragments.
"""

from __future__ import annotations
