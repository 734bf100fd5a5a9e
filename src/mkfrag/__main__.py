# topmark:header:start
#
#   project      : MkFrag
#   file         : __main__.py
#   file_relpath : src/mkfrag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MkFrag via ``python -m mkfrag``.

Delegates to :func:`mkfrag.cli.main.cli`, the single CLI entry point.

Examples:
    Render the product fragment of a document::

        python -m mkfrag product device.toml
"""

from __future__ import annotations

from mkfrag.cli.main import cli

if __name__ == "__main__":
    cli()
