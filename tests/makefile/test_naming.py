# topmark:header:start
#
#   project      : MkFrag
#   file         : test_naming.py
#   file_relpath : tests/makefile/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit and property tests for `sanitize_basename`."""

from __future__ import annotations

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mkfrag.makefile.naming import sanitize_basename

_SAFE_RE = re.compile(r"[a-z0-9_.\-]*")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("vendor/lib/libfoo.so", "libfoo.so"),
        ("libfoo-1.0_x.so", "libfoo-1.0_x.so"),
        ("etc/permissions/com.Google.Foo.xml", "com._oogle._oo.xml"),
        ("bin/hw/android.hardware.foo@1.0-service", "android.hardware.foo_1.0-service"),
        ("etc/my file+x", "my_file_x"),
        ("app/Foo/", "_oo"),
        ("plain", "plain"),
        ("", ""),
    ],
)
def test_sanitize_basename(path: str, expected: str) -> None:
    """Basename is extracted and every char outside [a-z0-9_.-] becomes '_'."""
    assert sanitize_basename(path) == expected


def test_uppercase_letters_are_replaced() -> None:
    """The allow-list is lowercase only: uppercase letters are not kept or lowered."""
    assert sanitize_basename("ABC") == "___"


@given(st.text(max_size=60))
def test_sanitize_is_idempotent_and_safe(text: str) -> None:
    """sanitize(sanitize(s)) == sanitize(s) and the output only uses safe chars."""
    once = sanitize_basename(text)
    assert sanitize_basename(once) == once
    assert _SAFE_RE.fullmatch(once) is not None
