# topmark:header:start
#
#   project      : MkFrag
#   file         : test_board_serializer.py
#   file_relpath : tests/makefile/test_board_serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the board fragment serializer and the copy descriptor helper."""

from __future__ import annotations

from mkfrag.constants import MAKEFILE_HEADER
from mkfrag.makefile.model import BlobEntry, BoardMakefile
from mkfrag.makefile.serializers import blob_to_file_copy, serialize_board_makefile


def test_board_scenario_is_exact() -> None:
    """Header, blank line, AB_OTA_PARTITIONS block, blank line, board info line."""
    mk = BoardMakefile(
        ab_ota_partitions=["system", "vendor"],
        board_info="device/foo/board-info.txt",
    )
    expected = "\n".join(
        [
            "# Generated by adevtool; do not edit",
            "# For more info, see https://github.com/kdrag0n/adevtool",
            "",
            "AB_OTA_PARTITIONS += \\",
            "    system \\",
            "    vendor",
            "",
            "TARGET_BOARD_INFO_FILE := device/foo/board-info.txt",
        ]
    )
    assert serialize_board_makefile(mk) == expected


def test_board_absent_fields_are_omitted() -> None:
    text = serialize_board_makefile(BoardMakefile())
    assert text == MAKEFILE_HEADER
    assert "AB_OTA_PARTITIONS" not in text
    assert "TARGET_BOARD_INFO_FILE" not in text


def test_board_info_only() -> None:
    text = serialize_board_makefile(BoardMakefile(board_info="b.txt"))
    assert text == MAKEFILE_HEADER + "\n\nTARGET_BOARD_INFO_FILE := b.txt"


def test_blob_to_file_copy_vendor() -> None:
    entry = BlobEntry(partition="vendor", path="etc/foo.conf", src_path="vendor/etc/foo.conf")
    assert blob_to_file_copy(entry, "vendor/google/raven/proprietary") == (
        "vendor/google/raven/proprietary/vendor/etc/foo.conf:"
        "$(TARGET_COPY_OUT_VENDOR)/etc/foo.conf"
    )


def test_blob_to_file_copy_system() -> None:
    entry = BlobEntry(partition="system", path="lib64/libfoo.so", src_path="system/lib64/libfoo.so")
    assert blob_to_file_copy(entry, "prop") == (
        "prop/system/lib64/libfoo.so:$(PRODUCT_OUT)/lib64/libfoo.so"
    )
