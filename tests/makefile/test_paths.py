# topmark:header:start
#
#   project      : MkFrag
#   file         : test_paths.py
#   file_relpath : tests/makefile/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for partition path mapping."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mkfrag.makefile.paths import part_path_to_make_path, partition_out_var


@pytest.mark.parametrize(
    ("partition", "subpath", "expected"),
    [
        ("system", "bin/sh", "$(PRODUCT_OUT)/bin/sh"),
        ("vendor", "etc/foo", "$(TARGET_COPY_OUT_VENDOR)/etc/foo"),
        ("product", "app/Foo/Foo.apk", "$(TARGET_COPY_OUT_PRODUCT)/app/Foo/Foo.apk"),
        ("system_ext", "lib64/libbar.so", "$(TARGET_COPY_OUT_SYSTEM_EXT)/lib64/libbar.so"),
    ],
)
def test_part_path_to_make_path(partition: str, subpath: str, expected: str) -> None:
    """Known partitions map to their output directory variable."""
    assert part_path_to_make_path(partition, subpath) == expected


def test_partition_name_is_case_preserved_in_subpath() -> None:
    """Only the partition name is upper-cased, never the subpath."""
    assert part_path_to_make_path("odm", "etc/Foo.XML") == "$(TARGET_COPY_OUT_ODM)/etc/Foo.XML"


def test_only_lowercase_system_uses_product_out() -> None:
    """'System' is not the system partition; it goes through the copy-out template."""
    assert partition_out_var("system") == "PRODUCT_OUT"
    assert partition_out_var("System") == "TARGET_COPY_OUT_SYSTEM"


_partitions = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=12).filter(
    lambda p: p != "system"
)
_subpaths = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABC0123456789_./-", max_size=40)


@given(partition=_partitions, subpath=_subpaths)
def test_non_system_partition_property(partition: str, subpath: str) -> None:
    """For p != system, the result ends with '/<s>' and names the upper-cased partition."""
    result = part_path_to_make_path(partition, subpath)
    assert result.endswith("/" + subpath)
    assert partition.upper() in result
    assert result.startswith(f"$(TARGET_COPY_OUT_{partition.upper()})/")


@given(subpath=_subpaths)
def test_system_partition_property(subpath: str) -> None:
    """mapPath('system', s) is exactly '$(PRODUCT_OUT)/' + s."""
    assert part_path_to_make_path("system", subpath) == "$(PRODUCT_OUT)/" + subpath
