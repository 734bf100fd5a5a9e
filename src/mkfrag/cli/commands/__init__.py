# topmark:header:start
#
#   project      : MkFrag
#   file         : __init__.py
#   file_relpath : src/mkfrag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MkFrag CLI subcommands."""
