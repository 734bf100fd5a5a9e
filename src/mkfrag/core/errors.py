# topmark:header:start
#
#   project      : MkFrag
#   file         : errors.py
#   file_relpath : src/mkfrag/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions.

The serializers never raise. Reading and interpreting fragment documents can
fail; those failures surface as `DocumentError` and are mapped to CLI exit
codes by `mkfrag.cli.errors`.
"""

from __future__ import annotations


class DocumentError(ValueError):
    """A fragment document could not be read, parsed, or interpreted.

    Attributes:
        source (str | None): Where the document came from (path or ``"<stdin>"``).
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)
