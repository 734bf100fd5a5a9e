# topmark:header:start
#
#   project      : MkFrag
#   file         : blocks.py
#   file_relpath : src/mkfrag/makefile/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Continuation blocks: list-valued make assignments spread over several lines.

A block for ``PRODUCT_PACKAGES`` with two items renders as::

    PRODUCT_PACKAGES += \\
        libfoo \\
        libbar
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mkfrag.constants import CONT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableSequence


def render_cont_block(variable: str, items: Iterable[str]) -> str:
    """Render ``variable += item...`` with one item per continuation line.

    An empty ``items`` still yields the assignment line followed by an empty
    continuation line.
    """
    return f"{variable} +={CONT_SEPARATOR}{CONT_SEPARATOR.join(items)}"


def add_cont_block(
    blocks: MutableSequence[str],
    variable: str,
    items: Iterable[str] | None,
) -> None:
    """Append a continuation block to ``blocks`` unless ``items`` is absent.

    Args:
        blocks (MutableSequence[str]): Top-level blocks of the fragment being built.
        variable (str): Make variable name (e.g. ``PRODUCT_COPY_FILES``).
        items (Iterable[str] | None): Values to append. ``None`` emits nothing; an
            empty sequence emits an assignment without items.
    """
    if items is not None:
        blocks.append(render_cont_block(variable, items))
