# topmark:header:start
#
#   project      : MkFrag
#   file         : keys.py
#   file_relpath : src/mkfrag/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for MkFrag fragment documents.

Keys defined here are the external document schema; renaming or removing one
is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by fragment documents."""

    # [device]
    SECTION_DEVICE: Final[str] = "device"

    KEY_NAME: Final[str] = "name"
    KEY_VENDOR: Final[str] = "vendor"

    # [modules] and [[modules.symlinks]]
    SECTION_MODULES: Final[str] = "modules"

    KEY_RADIO_FILES: Final[str] = "radio_files"
    KEY_SYMLINKS: Final[str] = "symlinks"

    KEY_MODULE_NAME: Final[str] = "module_name"
    KEY_LINK_PARTITION: Final[str] = "link_partition"
    KEY_LINK_SUBPATH: Final[str] = "link_subpath"
    KEY_TARGET_PATH: Final[str] = "target_path"

    # [product], [[product.blobs]] and [product.props.<partition>]
    SECTION_PRODUCT: Final[str] = "product"

    KEY_NAMESPACES: Final[str] = "namespaces"
    KEY_COPY_FILES: Final[str] = "copy_files"
    KEY_PACKAGES: Final[str] = "packages"
    KEY_FINGERPRINT: Final[str] = "fingerprint"
    KEY_PROPRIETARY_DIR: Final[str] = "proprietary_dir"
    KEY_PROPS: Final[str] = "props"
    KEY_BLOBS: Final[str] = "blobs"

    KEY_PARTITION: Final[str] = "partition"
    KEY_PATH: Final[str] = "path"
    KEY_SRC_PATH: Final[str] = "src_path"

    # [board]
    SECTION_BOARD: Final[str] = "board"

    KEY_AB_OTA_PARTITIONS: Final[str] = "ab_ota_partitions"
    KEY_BOARD_INFO: Final[str] = "board_info"
