# topmark:header:start
#
#   project      : MkFrag
#   file         : exit_codes.py
#   file_relpath : src/mkfrag/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the MkFrag CLI.

MkFrag aligns with the BSD `sysexits` convention where practical, so that
build scripts wrapping it can tell a bad document from an unwritable output
directory.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MkFrag CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input document does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a file failed. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid or incomplete fragment document. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
