# topmark:header:start
#
#   project      : MkFrag
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the MkFrag test suite.

Sets up TRACE logging for test runs, keeps the developer's ``MKFRAG_LOG_LEVEL``
from leaking into tests, and provides small builders for fragment documents.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from mkfrag.config import logging
from mkfrag.constants import LOG_LEVEL_ENV_VAR, MAKEFILE_HEADER

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

# Full header block as it appears at the top of every fragment.
HEADER: str = MAKEFILE_HEADER


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_mkfrag_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure MkFrag's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a TOML fragment document under ``tmp_path``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Callable[..., Path]: ``write(text, name="device.toml") -> path``.
    """

    def _write(text: str, name: str = "device.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return cast("Callable[..., Path]", _write)


def join_blocks(*blocks: str) -> str:
    """Join expected fragment blocks with a blank line, header first."""
    return "\n\n".join((HEADER, *blocks))
