# topmark:header:start
#
#   project      : MkFrag
#   file         : test_copy_files.py
#   file_relpath : tests/cli/test_copy_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `copy-files` descriptor listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

BLOBS_DOC = """
[product]
proprietary_dir = "vendor/google/raven/proprietary"

[[product.blobs]]
partition = "system"
path = "lib64/libfoo.so"
src_path = "system/lib64/libfoo.so"

[[product.blobs]]
partition = "system_ext"
path = "etc/permissions/bar.xml"
src_path = "system_ext/etc/permissions/bar.xml"
"""


@mark_cli
def test_copy_files_lists_descriptors_in_order(write_document: Callable[..., Path]) -> None:
    path = write_document(BLOBS_DOC)
    result = run_cli(["copy-files", str(path)])

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [
        "vendor/google/raven/proprietary/system/lib64/libfoo.so:$(PRODUCT_OUT)/lib64/libfoo.so",
        "vendor/google/raven/proprietary/system_ext/etc/permissions/bar.xml:"
        "$(TARGET_COPY_OUT_SYSTEM_EXT)/etc/permissions/bar.xml",
    ]


@mark_cli
def test_copy_files_proprietary_dir_option(write_document: Callable[..., Path]) -> None:
    path = write_document(BLOBS_DOC)
    result = run_cli(["copy-files", str(path), "--proprietary-dir", "out/prop"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines()[0] == (
        "out/prop/system/lib64/libfoo.so:$(PRODUCT_OUT)/lib64/libfoo.so"
    )


@mark_cli
def test_copy_files_without_blobs_prints_nothing(write_document: Callable[..., Path]) -> None:
    path = write_document("[product]\n")
    result = run_cli(["copy-files", str(path)])

    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_copy_files_requires_proprietary_dir(write_document: Callable[..., Path]) -> None:
    text = BLOBS_DOC.replace('proprietary_dir = "vendor/google/raven/proprietary"', "")
    path = write_document(text)
    result = run_cli(["copy-files", str(path)])

    assert_CONFIG_ERROR(result)
    assert "proprietary_dir" in result.output
