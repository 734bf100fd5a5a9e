# topmark:header:start
#
#   project      : MkFrag
#   file         : serializers.py
#   file_relpath : src/mkfrag/makefile/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializers turning fragment records into make text.

Each serializer builds a list of top-level blocks, starting with the fixed
header, and joins them with one blank line. Output never ends with a newline;
writers append it. The functions are pure: no I/O, no shared state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mkfrag.config.logging import get_logger
from mkfrag.constants import BLOCK_SEPARATOR, MAKEFILE_HEADER
from mkfrag.makefile.blocks import add_cont_block, render_cont_block
from mkfrag.makefile.paths import part_path_to_make_path

if TYPE_CHECKING:
    from mkfrag.config.logging import MkfragLogger
    from mkfrag.makefile.model import (
        BlobEntry,
        BoardMakefile,
        ModulesMakefile,
        ProductMakefile,
        Symlink,
    )

logger: MkfragLogger = get_logger(__name__)


def blob_to_file_copy(entry: BlobEntry, proprietary_dir: str) -> str:
    """Return the ``PRODUCT_COPY_FILES`` descriptor ``<src>:<dest>`` for a blob.

    Args:
        entry (BlobEntry): Blob to copy.
        proprietary_dir (str): Directory the blob's ``src_path`` is relative to.

    Returns:
        str: ``<proprietary_dir>/<src_path>:<make path of partition/path>``.
    """
    dest_path: str = part_path_to_make_path(entry.partition, entry.path)
    return f"{proprietary_dir}/{entry.src_path}:{dest_path}"


def render_symlink_module(link: Symlink, vendor: str) -> str:
    """Render the FAKE module whose build creates ``link``.

    Recipe lines are tab-indented as required by make.
    """
    dest_path: str = part_path_to_make_path(link.link_partition, link.link_subpath)
    return "\n".join(
        [
            "include $(CLEAR_VARS)",
            f"LOCAL_MODULE := {link.module_name}",
            "LOCAL_MODULE_CLASS := FAKE",
            "LOCAL_MODULE_TAGS := optional",
            f"LOCAL_MODULE_OWNER := {vendor}",
            "include $(BUILD_SYSTEM)/base_rules.mk",
            f"$(LOCAL_BUILT_MODULE): TARGET := {link.target_path}",
            f"$(LOCAL_BUILT_MODULE): SYMLINK := {dest_path}",
            "$(LOCAL_BUILT_MODULE):",
            "\t$(hide) mkdir -p $(dir $@)",
            "\t$(hide) mkdir -p $(dir $(SYMLINK))",
            "\t$(hide) rm -rf $@",
            "\t$(hide) rm -rf $(SYMLINK)",
            "\t$(hide) ln -sf $(TARGET) $(SYMLINK)",
            "\t$(hide) touch $@",
        ]
    )


def serialize_modules_makefile(mk: ModulesMakefile) -> str:
    """Render the modules fragment: radio images and one module per symlink.

    Everything after ``LOCAL_PATH`` is guarded by ``ifeq ($(TARGET_DEVICE),<device>)``.
    Symlinks keep their input order; duplicates are not detected.

    Args:
        mk (ModulesMakefile): Fragment input.

    Returns:
        str: The fragment text.
    """
    logger.debug(
        "Serializing modules makefile for %s/%s: %d symlink(s), radio files %s",
        mk.vendor,
        mk.device,
        len(mk.symlinks),
        "absent" if mk.radio_files is None else len(mk.radio_files),
    )
    blocks: list[str] = [
        MAKEFILE_HEADER,
        "LOCAL_PATH := $(call my-dir)",
        f"ifeq ($(TARGET_DEVICE),{mk.device})",
    ]

    if mk.radio_files is not None:
        blocks.append("\n".join(f"$(call add-radio-file,{img})" for img in mk.radio_files))

    for link in mk.symlinks:
        logger.trace("Symlink module %s -> %s", link.module_name, link.target_path)
        blocks.append(render_symlink_module(link, mk.vendor))

    blocks.append("endif")
    return BLOCK_SEPARATOR.join(blocks)


def serialize_product_makefile(mk: ProductMakefile) -> str:
    """Render the product fragment.

    Blocks, in order and each only when present: namespaces, copy files,
    packages, one ``PRODUCT_<PARTITION>_PROPERTIES`` block per partition with at
    least one property, and the fingerprint override.

    Args:
        mk (ProductMakefile): Fragment input.

    Returns:
        str: The fragment text.
    """
    logger.debug("Serializing product makefile")
    blocks: list[str] = [MAKEFILE_HEADER]

    add_cont_block(blocks, "PRODUCT_SOONG_NAMESPACES", mk.namespaces)
    add_cont_block(blocks, "PRODUCT_COPY_FILES", mk.copy_files)
    add_cont_block(blocks, "PRODUCT_PACKAGES", mk.packages)

    if mk.props is not None:
        for partition, props in mk.props.items():
            if not props:
                logger.trace("Skipping partition %s without properties", partition)
                continue

            prop_lines = [f"{key}={value}" for key, value in props.items()]
            blocks.append(render_cont_block(f"PRODUCT_{partition.upper()}_PROPERTIES", prop_lines))

    if mk.fingerprint is not None:
        blocks.append(f"PRODUCT_OVERRIDE_FINGERPRINT += {mk.fingerprint}")

    return BLOCK_SEPARATOR.join(blocks)


def serialize_board_makefile(mk: BoardMakefile) -> str:
    """Render the board fragment: A/B OTA partitions and the board info file."""
    logger.debug("Serializing board makefile")
    blocks: list[str] = [MAKEFILE_HEADER]

    add_cont_block(blocks, "AB_OTA_PARTITIONS", mk.ab_ota_partitions)

    if mk.board_info is not None:
        blocks.append(f"TARGET_BOARD_INFO_FILE := {mk.board_info}")

    return BLOCK_SEPARATOR.join(blocks)
