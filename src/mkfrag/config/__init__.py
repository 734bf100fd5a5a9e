# topmark:header:start
#
#   project      : MkFrag
#   file         : __init__.py
#   file_relpath : src/mkfrag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for MkFrag.

Fragment documents are TOML files describing one device's modules, product and
board fragments. `mkfrag.config.io` parses them into plain tables and
`mkfrag.config.documents` turns those tables into the immutable records consumed
by the serializers.

This package module stays import-light: `mkfrag.makefile` imports the logging
helpers from here, so nothing in this file may import the serializers.
"""

from __future__ import annotations
