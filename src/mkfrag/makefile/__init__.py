# topmark:header:start
#
#   project      : MkFrag
#   file         : __init__.py
#   file_relpath : src/mkfrag/makefile/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Android make fragment serialization.

Pure, deterministic rendering of fragment records into make text:

- `serialize_modules_makefile`: ``Android.mk`` with symlink modules and radio files.
- `serialize_product_makefile`: product variables and per-partition properties.
- `serialize_board_makefile`: A/B OTA partitions and board info.
"""

from __future__ import annotations

from mkfrag.makefile.blocks import add_cont_block, render_cont_block
from mkfrag.makefile.model import (
    BlobEntry,
    BoardMakefile,
    ModulesMakefile,
    PartitionProps,
    ProductMakefile,
    Symlink,
)
from mkfrag.makefile.naming import sanitize_basename
from mkfrag.makefile.paths import part_path_to_make_path, partition_out_var
from mkfrag.makefile.serializers import (
    blob_to_file_copy,
    render_symlink_module,
    serialize_board_makefile,
    serialize_modules_makefile,
    serialize_product_makefile,
)

__all__ = [
    "BlobEntry",
    "BoardMakefile",
    "ModulesMakefile",
    "PartitionProps",
    "ProductMakefile",
    "Symlink",
    "add_cont_block",
    "blob_to_file_copy",
    "part_path_to_make_path",
    "partition_out_var",
    "render_cont_block",
    "render_symlink_module",
    "sanitize_basename",
    "serialize_board_makefile",
    "serialize_modules_makefile",
    "serialize_product_makefile",
]
