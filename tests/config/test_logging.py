# topmark:header:start
#
#   project      : MkFrag
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for MkFrag logging helpers."""

from __future__ import annotations

import logging as std_logging

import pytest

from mkfrag.config.logging import (
    TRACE_LEVEL,
    MkfragLogger,
    get_logger,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv("MKFRAG_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


class _ListHandler(std_logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=std_logging.NOTSET)
        self.records: list[std_logging.LogRecord] = []

    def emit(self, record: std_logging.LogRecord) -> None:
        self.records.append(record)


def test_get_logger_supports_trace() -> None:
    logger = get_logger("mkfrag.tests.trace")
    assert isinstance(logger, MkfragLogger)

    handler = _ListHandler()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(TRACE_LEVEL)
    try:
        logger.trace("hello %s", "trace")
    finally:
        logger.removeHandler(handler)

    assert [r.getMessage() for r in handler.records] == ["hello trace"]
    assert handler.records[0].levelname == "TRACE"
