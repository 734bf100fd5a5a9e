# topmark:header:start
#
#   project      : MkFrag
#   file         : model.py
#   file_relpath : src/mkfrag/makefile/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input records for the make fragment serializers.

All records are immutable value objects built by upstream extraction (or by
`mkfrag.config.documents`) and consumed once by a serializer.

Optional fields use ``None`` for "absent". An absent field makes the matching
output block disappear entirely; a present-but-empty list is still rendered.

Ordering:
    `PartitionProps` is an ordered mapping (plain ``dict`` preserves insertion
    order). Partition order and key order within a partition decide the line
    order of the emitted property blocks.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

# partition name -> (property key -> property value), both in insertion order
PartitionProps: TypeAlias = Mapping[str, Mapping[str, str]]


@dataclass(frozen=True, slots=True)
class BlobEntry:
    """One file copied from the proprietary source tree into a partition.

    Attributes:
        partition (str): Target partition (e.g. ``"vendor"``).
        path (str): Destination path inside the partition's output tree.
        src_path (str): Source path relative to the proprietary directory.
    """

    partition: str
    path: str
    src_path: str


@dataclass(frozen=True, slots=True)
class Symlink:
    """A synthetic module that creates ``link_partition:link_subpath -> target_path``.

    Attributes:
        module_name (str): Build module name; should be unique within one fragment.
        link_partition (str): Partition holding the symlink.
        link_subpath (str): Symlink path inside the partition.
        target_path (str): Literal symlink target, emitted verbatim.
    """

    module_name: str
    link_partition: str
    link_subpath: str
    target_path: str


@dataclass(frozen=True, slots=True)
class ModulesMakefile:
    """Input of the modules fragment (``Android.mk``)."""

    device: str
    vendor: str
    radio_files: Sequence[str] | None = None
    symlinks: Sequence[Symlink] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ProductMakefile:
    """Input of the product fragment (``<device>-vendor.mk``)."""

    namespaces: Sequence[str] | None = None
    copy_files: Sequence[str] | None = None
    packages: Sequence[str] | None = None
    props: PartitionProps | None = None
    fingerprint: str | None = None


@dataclass(frozen=True, slots=True)
class BoardMakefile:
    """Input of the board fragment (``BoardConfigVendor.mk``)."""

    ab_ota_partitions: Sequence[str] | None = None
    board_info: str | None = None
