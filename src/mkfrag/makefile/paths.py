# topmark:header:start
#
#   project      : MkFrag
#   file         : paths.py
#   file_relpath : src/mkfrag/makefile/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Partition path addressing in make syntax."""

from __future__ import annotations

from typing import Final

# The system partition is addressed through the generic product output directory.
SYSTEM_PARTITION: Final[str] = "system"
PRODUCT_OUT_VAR: Final[str] = "PRODUCT_OUT"
COPY_OUT_VAR_TEMPLATE: Final[str] = "TARGET_COPY_OUT_{partition}"


def partition_out_var(partition: str) -> str:
    """Return the name of the make variable holding ``partition``'s output directory.

    Args:
        partition (str): Partition name, case-preserved (e.g. ``"vendor"``).

    Returns:
        str: ``PRODUCT_OUT`` for ``system``, else ``TARGET_COPY_OUT_<PARTITION>``.
    """
    if partition == SYSTEM_PARTITION:
        return PRODUCT_OUT_VAR
    return COPY_OUT_VAR_TEMPLATE.format(partition=partition.upper())


def part_path_to_make_path(partition: str, subpath: str) -> str:
    """Map a path inside a partition to a make path expression.

    ``("vendor", "etc/foo")`` maps to ``$(TARGET_COPY_OUT_VENDOR)/etc/foo`` and
    ``("system", "bin/sh")`` to ``$(PRODUCT_OUT)/bin/sh``. An empty partition name is
    a caller error and yields a malformed variable reference.

    Args:
        partition (str): Partition name.
        subpath (str): Path relative to the partition root.

    Returns:
        str: ``$(<dir variable>)/<subpath>``.
    """
    return f"$({partition_out_var(partition)})/{subpath}"
